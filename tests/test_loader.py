# tests/test_loader.py
"""
Loader Tests - Unit Tests for Layered XML Settings Loading

This module tests SettingsLoader: add/remove/clear directives, included
files, load order bookkeeping, and how read, parse and structure errors
are reported.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- appsettings.application.loader (SettingsLoader)
- appsettings.adapters.xml (SettingsNode for a parser-independent test)
- appsettings.domain.errors (LoadError)
"""
import os  # Path joining for include layouts
from xml.etree.ElementTree import ParseError  # Malformed document error

import pytest  # Testing framework for writing and running tests
import defusedxml  # Hardened XML parsing exceptions

from appsettings.adapters.xml import SettingsNode
from appsettings.application.loader import SettingsLoader
from appsettings.domain.errors import LoadError, PathResolutionError


def _primary(body: str, file_attr: str = "") -> str:
    attr = f' file="{file_attr}"' if file_attr else ""
    return f'<?xml version="1.0" encoding="utf-8"?>\n<configuration>\n  <appSettings{attr}>\n{body}\n  </appSettings>\n</configuration>\n'


def _included(body: str) -> str:
    return f'<?xml version="1.0" encoding="utf-8"?>\n<appSettings>\n{body}\n</appSettings>\n'


class TestDirectives:
    def test_add_entries_in_document_order(self, write_config):
        path = write_config("app.dll.config", _primary(
            '<add key="a" value="1"/><add key="b" value="2"/><add key="a" value="3"/>'
        ))

        result = SettingsLoader().load(path)

        assert result.values == {"a": "3", "b": "2"}
        assert result.filenames == (path,)

    def test_remove_deletes_key(self, write_config):
        path = write_config("app.dll.config", _primary(
            '<add key="a" value="1"/><add key="b" value="2"/><remove key="a"/>'
        ))

        assert SettingsLoader().load(path).values == {"b": "2"}

    def test_remove_of_absent_key_is_noop(self, write_config):
        path = write_config("app.dll.config", _primary(
            '<remove key="missing"/><add key="b" value="2"/>'
        ))

        assert SettingsLoader().load(path).values == {"b": "2"}

    def test_clear_discards_earlier_entries(self, write_config):
        path = write_config("app.dll.config", _primary(
            '<add key="a" value="1"/><clear/><add key="b" value="2"/>'
        ))

        assert SettingsLoader().load(path).values == {"b": "2"}

    def test_missing_value_reads_as_empty(self, write_config):
        path = write_config("app.dll.config", _primary('<add key="flag"/>'))

        assert SettingsLoader().load(path).values == {"flag": ""}

    def test_keyless_and_unknown_elements_ignored(self, write_config):
        path = write_config("app.dll.config", _primary(
            '<add value="orphan"/><remove/><section name="x"/><!-- note --><add key="a" value="1"/>'
        ))

        assert SettingsLoader().load(path).values == {"a": "1"}

    def test_keys_are_case_sensitive(self, write_config):
        path = write_config("app.dll.config", _primary(
            '<add key="Name" value="upper"/><add key="name" value="lower"/>'
        ))

        assert SettingsLoader().load(path).values == {"Name": "upper", "name": "lower"}

    def test_values_are_not_expanded_while_loading(self, write_config):
        path = write_config("app.dll.config", _primary('<add key="a" value="${b}"/>'))

        assert SettingsLoader().load(path).values == {"a": "${b}"}


class TestIncludes:
    def test_included_entries_visible_and_overridden(self, write_config):
        shared = write_config("shared.config", _included(
            '<add key="db" value="shared-db"/><add key="timeout" value="30"/>'
        ))
        path = write_config("app.dll.config", _primary(
            '<add key="db" value="local-db"/>', file_attr="shared.config"
        ))

        result = SettingsLoader().load(path)

        assert result.values == {"db": "local-db", "timeout": "30"}
        assert result.filenames == (path, shared)

    def test_clear_in_including_file_discards_included_entries(self, write_config):
        write_config("shared.config", _included('<add key="a" value="1"/>'))
        path = write_config("app.dll.config", _primary(
            '<clear/><add key="b" value="2"/>', file_attr="shared.config"
        ))

        assert SettingsLoader().load(path).values == {"b": "2"}

    def test_remove_in_including_file_drops_included_entry(self, write_config):
        write_config("shared.config", _included('<add key="a" value="1"/><add key="c" value="3"/>'))
        path = write_config("app.dll.config", _primary('<remove key="a"/>', file_attr="shared.config"))

        assert SettingsLoader().load(path).values == {"c": "3"}

    def test_include_resolved_relative_to_including_file(self, write_config, tmp_path):
        shared = write_config(os.path.join("conf", "shared.config"), _included('<add key="a" value="1"/>'))
        path = write_config("app.dll.config", _primary("", file_attr="conf/shared.config"))

        result = SettingsLoader().load(path)

        assert result.values == {"a": "1"}
        assert os.path.normpath(result.filenames[1]) == os.path.normpath(shared)

    def test_include_chain(self, write_config):
        write_config("base.config", _included('<add key="level" value="base"/><add key="x" value="1"/>'))
        write_config("shared.config", _included('<add key="level" value="shared"/>').replace(
            "<appSettings>", '<appSettings file="base.config">'
        ))
        path = write_config("app.dll.config", _primary("", file_attr="shared.config"))

        result = SettingsLoader().load(path)

        assert result.values == {"level": "shared", "x": "1"}
        assert [os.path.basename(f) for f in result.filenames] == [
            "app.dll.config", "shared.config", "base.config"
        ]

    def test_circular_include_raises(self, write_config):
        path = write_config("app.dll.config", _primary("", file_attr="app.dll.config"))

        with pytest.raises(LoadError, match="Error while processing") as exc_info:
            SettingsLoader().load(path)

        assert isinstance(exc_info.value.__cause__, LoadError)
        assert "Circular include" in str(exc_info.value.__cause__)

    def test_circular_include_through_symlinks(self, write_config, tmp_path):
        path = write_config("app.dll.config", _primary("", file_attr="shared-link.config"))
        shared = write_config("shared.config", _included("").replace(
            "<appSettings>", '<appSettings file="app-link.config">'
        ))
        try:
            os.symlink(shared, tmp_path / "shared-link.config")
            os.symlink(path, tmp_path / "app-link.config")
        except (OSError, NotImplementedError):
            pytest.skip("symlinks not available")

        with pytest.raises(LoadError) as exc_info:
            SettingsLoader().load(path)

        messages = []
        err = exc_info.value
        while err is not None:
            messages.append(str(err))
            err = err.__cause__
        assert any("Circular include" in m for m in messages)

    def test_missing_included_file_names_both_files(self, write_config):
        path = write_config("app.dll.config", _primary("", file_attr="nowhere.config"))

        with pytest.raises(LoadError) as exc_info:
            SettingsLoader().load(path)

        assert exc_info.value.filename == path
        inner = exc_info.value.__cause__
        assert isinstance(inner, LoadError)
        assert inner.filename.endswith("nowhere.config")
        assert isinstance(inner.__cause__, FileNotFoundError)

    def test_include_without_directory_raises(self):
        root = _FakeNode("configuration", children=[
            _FakeNode("appSettings", attributes={"file": "shared.config"}),
        ])
        loader = SettingsLoader(parser=lambda filename: root)

        with pytest.raises(LoadError) as exc_info:
            loader.load("app.dll.config")

        assert isinstance(exc_info.value.__cause__, PathResolutionError)


class TestLoadErrors:
    def test_missing_file(self, tmp_path):
        path = str(tmp_path / "absent.dll.config")

        with pytest.raises(LoadError, match="Failed to load") as exc_info:
            SettingsLoader().load(path)

        assert exc_info.value.filename == path
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_malformed_document(self, write_config):
        path = write_config("app.dll.config", "<configuration><appSettings></configuration>")

        with pytest.raises(LoadError, match="Failed to load") as exc_info:
            SettingsLoader().load(path)

        assert isinstance(exc_info.value.__cause__, ParseError)

    def test_dtd_rejected(self, write_config):
        path = write_config("app.dll.config", (
            '<?xml version="1.0"?>\n'
            '<!DOCTYPE configuration [<!ENTITY secret SYSTEM "file:///etc/passwd">]>\n'
            '<configuration><appSettings><add key="a" value="&secret;"/></appSettings></configuration>\n'
        ))

        with pytest.raises(LoadError, match="Failed to load") as exc_info:
            SettingsLoader().load(path)

        assert isinstance(exc_info.value.__cause__, defusedxml.DefusedXmlException)

    def test_missing_element(self, write_config):
        path = write_config("app.dll.config", "<configuration><other/></configuration>")

        with pytest.raises(LoadError, match="Error while processing") as exc_info:
            SettingsLoader().load(path)

        assert "Missing element configuration/appSettings" in str(exc_info.value.__cause__)

    def test_primary_selector_does_not_match_included_layout(self, write_config):
        path = write_config("shared.config", _included('<add key="a" value="1"/>'))

        with pytest.raises(LoadError):
            SettingsLoader().load(path)

        assert SettingsLoader().load(path, "appSettings").values == {"a": "1"}

    def test_file_recorded_even_if_processing_fails(self, write_config):
        path = write_config("app.dll.config", "<configuration/>")
        filenames = []

        with pytest.raises(LoadError):
            SettingsLoader()._load(path, "configuration/appSettings", filenames, {}, ())

        assert filenames == [path]


class _FakeNode(SettingsNode):
    def __init__(self, name, attributes=None, children=None):
        self._name = name
        self._attributes = attributes or {}
        self._children = children or []

    @property
    def name(self):
        return self._name

    def get(self, attribute):
        return self._attributes.get(attribute)

    def children(self):
        return list(self._children)


class TestCustomParser:
    def test_loader_walks_any_settings_node_tree(self):
        root = _FakeNode("configuration", children=[
            _FakeNode("appSettings", children=[
                _FakeNode("add", {"key": "a", "value": "1"}),
                _FakeNode("add", {"key": "b", "value": "2"}),
                _FakeNode("remove", {"key": "a"}),
            ]),
        ])
        loader = SettingsLoader(parser=lambda filename: root)

        result = loader.load("/etc/app.dll.config")

        assert result.values == {"b": "2"}
        assert result.filenames == ("/etc/app.dll.config",)

    def test_select_requires_matching_root(self):
        root = _FakeNode("configuration", children=[_FakeNode("appSettings")])

        assert root.select("configuration/appSettings").name == "appSettings"
        assert root.select("/configuration/appSettings/").name == "appSettings"
        assert root.select("appSettings") is None
        assert root.select("configuration/missing") is None
