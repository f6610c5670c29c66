# src/appsettings/adapters/xml/base.py
"""
Base Node Interface for Parsed Settings Documents

This module defines the abstract element interface the settings loader walks.
It keeps the loader independent of the XML library that produced the tree.

Files that USE this module:
- appsettings.adapters.xml.document (EtreeNode implements SettingsNode)
- appsettings.application.loader (walks SettingsNode trees)

Files that this module USES:
- None (pure interface definition)
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional


class SettingsNode(ABC):
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the element name."""
        raise NotImplementedError

    @abstractmethod
    def get(self, attribute: str) -> Optional[str]:
        """Return the attribute value, or None if the attribute is absent."""
        raise NotImplementedError

    @abstractmethod
    def children(self) -> List[SettingsNode]:
        """Return the immediate child elements in document order."""
        raise NotImplementedError

    def select(self, path: str) -> Optional[SettingsNode]:
        """
        Find an element by a slash-separated path starting at this node.

        The first segment must name this node; each following segment selects
        the first child with that name (``configuration/appSettings``).

        Args:
            path: Element path, leading and trailing slashes ignored

        Returns:
            Matching node, or None if any segment is missing
        """
        segments = [s for s in path.strip("/").split("/") if s]
        if not segments or segments[0] != self.name:
            return None

        node: Optional[SettingsNode] = self
        for segment in segments[1:]:
            node = next((c for c in node.children() if c.name == segment), None)
            if node is None:
                return None
        return node
