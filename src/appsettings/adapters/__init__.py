# src/appsettings/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains adapters for external systems:
- XML settings documents
"""
