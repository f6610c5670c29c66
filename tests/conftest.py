# tests/conftest.py
"""
Shared Test Fixtures

Files that USE this module:
- pytest (fixtures for all test modules)
"""
import pytest  # Testing framework for writing and running tests


@pytest.fixture
def write_config(tmp_path):
    """Write a settings file under tmp_path and return its absolute path as str."""
    def _write(relative: str, body: str) -> str:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(body, encoding="utf-8")
        return str(path)
    return _write
