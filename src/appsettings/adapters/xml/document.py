# src/appsettings/adapters/xml/document.py
"""
XML Document Adapter - Hardened Settings File Parsing

Parses settings files with defusedxml, which rejects DTDs, entity
declarations and external references before any of them are processed.
The parsed ElementTree is exposed through the SettingsNode interface.

Files that USE this module:
- appsettings.application.loader (parse_document is the default parser)

Files that this module USES:
- appsettings.adapters.xml.base (SettingsNode interface)
"""
from __future__ import annotations

from typing import List, Optional
from xml.etree.ElementTree import Element

import defusedxml.ElementTree as SafeET  # ElementTree parsing with XXE / DTD protection

from appsettings.adapters.xml.base import SettingsNode


class EtreeNode(SettingsNode):
    """SettingsNode backed by an ElementTree element."""

    def __init__(self, element: Element):
        self._element = element

    @property
    def name(self) -> str:
        return self._element.tag

    def get(self, attribute: str) -> Optional[str]:
        return self._element.get(attribute)

    def children(self) -> List[SettingsNode]:
        # Comments and processing instructions have non-string tags
        return [EtreeNode(child) for child in self._element if isinstance(child.tag, str)]

    def __repr__(self) -> str:
        return f"EtreeNode({self.name!r})"


def parse_document(filename: str) -> SettingsNode:
    """
    Parse a settings file into its root node.

    Args:
        filename: Path of the XML document

    Returns:
        Root SettingsNode

    Raises:
        OSError: If the file cannot be read
        xml.etree.ElementTree.ParseError: If the document is malformed
        defusedxml.DefusedXmlException: If the document declares a DTD,
            entities or external references
    """
    tree = SafeET.parse(
        filename,
        forbid_dtd=True,
        forbid_entities=True,
        forbid_external=True,
    )
    return EtreeNode(tree.getroot())
