# src/appsettings/adapters/xml/__init__.py
"""
XML Adapters - Settings Document Parsing

This package parses settings files and exposes them as SettingsNode trees.
"""

from appsettings.adapters.xml.base import SettingsNode
from appsettings.adapters.xml.document import EtreeNode, parse_document

__all__ = [
    "SettingsNode",
    "EtreeNode",
    "parse_document",
]
