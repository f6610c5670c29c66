# src/appsettings/application/loader.py
"""
Settings Loader - Layered XML Settings Loading

Loads an ``appSettings`` element and everything it includes into one flat
key/value map. Directives are applied in order:

- an included file (``file`` attribute on the element) is loaded first
- ``<add key="..." value="..."/>`` sets a key (last write wins)
- ``<remove key="..."/>`` deletes a key if present
- ``<clear/>`` empties the map, including entries from an included file

Files that USE this module:
- appsettings.application.store (build_static_settings)

Files that this module USES:
- appsettings.adapters.xml (SettingsNode, parse_document)
- appsettings.domain (LoadedSettings, LoadError)
- appsettings.shared.process (directory_of for include resolution)
"""
from __future__ import annotations

import logging
import os
from typing import Callable, Dict, List, Tuple

from appsettings.adapters.xml import SettingsNode, parse_document
from appsettings.domain.errors import LoadError
from appsettings.domain.models import LoadedSettings
from appsettings.shared.process import directory_of

logger = logging.getLogger(__name__)

ROOT_SELECTOR = "configuration/appSettings"
INCLUDE_SELECTOR = "appSettings"


class SettingsLoader:
    """Loads settings files into a flattened LoadedSettings."""

    def __init__(
        self,
        parser: Callable[[str], SettingsNode] = parse_document,
        include_selector: str = INCLUDE_SELECTOR,
    ):
        """
        Args:
            parser: Turns a file path into a root SettingsNode
            include_selector: Element path used for included files
        """
        self.parser = parser
        self.include_selector = include_selector

    def load(self, filename: str, selector: str = ROOT_SELECTOR) -> LoadedSettings:
        """
        Load a settings file and its includes.

        Args:
            filename: Path of the primary settings file
            selector: Element path of the appSettings element in that file

        Returns:
            LoadedSettings with the files read (in load order) and the final map

        Raises:
            LoadError: If any file cannot be read, parsed or processed
        """
        filenames: List[str] = []
        values: Dict[str, str] = {}
        self._load(filename, selector, filenames, values, ())
        logger.info("Loaded %d setting(s) from %s", len(values), ", ".join(filenames))
        return LoadedSettings(filenames=tuple(filenames), values=values)

    def _load(
        self,
        filename: str,
        selector: str,
        filenames: List[str],
        values: Dict[str, str],
        chain: Tuple[str, ...],
    ) -> None:
        try:
            root = self.parser(filename)
        except Exception as e:
            raise LoadError(f"Failed to load '{filename}'.", filename=filename) from e

        filenames.append(filename)
        logger.debug("Parsed settings file %s", filename)

        try:
            element = root.select(selector)
            if element is None:
                raise LoadError(f"Missing element {selector}", filename=filename)

            include = element.get("file")
            if include is not None:
                included = os.path.join(directory_of(filename), include)
                # Symlinks resolved so aliases of one file compare equal
                key = os.path.normcase(os.path.realpath(filename))
                if os.path.normcase(os.path.realpath(included)) in chain + (key,):
                    raise LoadError(f"Circular include of '{included}'.", filename=included)
                self._load(included, self.include_selector, filenames, values, chain + (key,))

            self._apply(element, values)
        except Exception as e:
            raise LoadError(f"Error while processing '{filename}'.", filename=filename) from e

    @staticmethod
    def _apply(element: SettingsNode, values: Dict[str, str]) -> None:
        """Apply add/remove/clear directives of an appSettings element in order."""
        applied = 0
        for child in element.children():
            if child.name == "add":
                key = child.get("key")
                if key is not None:
                    values[key] = child.get("value") or ""
                    applied += 1
            elif child.name == "remove":
                key = child.get("key")
                if key is not None:
                    values.pop(key, None)
                    applied += 1
            elif child.name == "clear":
                values.clear()
                applied += 1
        logger.debug("Applied %d directive(s)", applied)
