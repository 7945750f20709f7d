"""
skinmod/folders.py

Enabled/disabled state of a mod folder, encoded in the folder name itself.

Provides:
- DISABLED_PREFIX, ALT_DISABLED_PREFIX constants
- FolderStateCodec with pure static helpers to add, remove and compare the
  disabled marker (case-insensitive)
- ModFolder dataclass and ModFolderScanner, an async read-only listing of the
  mod folders under a mods directory

A disabled mod lives in a folder named ``DISABLED_<name>``. Older installs used
``DISABLED<name>`` without the separator; both spellings are recognised and
always rewritten to the canonical one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path, PureWindowsPath
from typing import List, Optional

DISABLED_PREFIX = "DISABLED_"
ALT_DISABLED_PREFIX = "DISABLED"

# Longest spelling first so the canonical marker wins over its own prefix.
_MARKERS = (DISABLED_PREFIX, ALT_DISABLED_PREFIX)


def _starts_with(name: str, prefix: str) -> bool:
    return name[: len(prefix)].lower() == prefix.lower()


def folder_name_from_path(path: str) -> str:
    """Last segment of a Windows or POSIX path; a trailing separator is ignored."""
    return PureWindowsPath(path).name


class FolderStateCodec:
    """Maps folder names to and from their disabled representation.

    Every method is pure and total: empty or odd names are handled as plain
    strings and nothing is raised.
    """

    @staticmethod
    def marker_of(folder_name: str) -> Optional[str]:
        """Return the marker spelling the name starts with, or None."""
        for marker in _MARKERS:
            if _starts_with(folder_name, marker):
                return marker
        return None

    @staticmethod
    def strip_disabled_marker(folder_name: str) -> str:
        """Remove the leading disabled marker; names without one are returned as is.

        Only the leading occurrence is removed, so ``DISABLED_Foo_DISABLED_``
        becomes ``Foo_DISABLED_``.
        """
        marker = FolderStateCodec.marker_of(folder_name)
        if marker is None:
            return folder_name
        return folder_name[len(marker) :]

    @staticmethod
    def apply_disabled_marker(folder_name: str) -> str:
        """Return the name with the canonical marker. Idempotent.

        A legacy ``DISABLED`` lead is rewritten to ``DISABLED_``.
        """
        marker = FolderStateCodec.marker_of(folder_name)
        if marker == DISABLED_PREFIX:
            return folder_name
        if marker == ALT_DISABLED_PREFIX:
            return DISABLED_PREFIX + folder_name[len(marker) :]
        return DISABLED_PREFIX + folder_name

    @staticmethod
    def names_equal_ignoring_state(
        folder_name1: str, folder_name2: str, absolute_paths: bool = False
    ) -> bool:
        """Compare two folder names case-insensitively, ignoring the disabled marker.

        With ``absolute_paths`` each argument is reduced to its last path segment first.
        """
        if absolute_paths:
            folder_name1 = folder_name_from_path(folder_name1)
            folder_name2 = folder_name_from_path(folder_name2)

        stripped1 = FolderStateCodec.strip_disabled_marker(folder_name1)
        stripped2 = FolderStateCodec.strip_disabled_marker(folder_name2)
        return stripped1.lower() == stripped2.lower()

    @staticmethod
    def has_disabled_marker(folder_name: str, absolute_path: bool = False) -> bool:
        if absolute_path:
            folder_name = folder_name_from_path(folder_name)
        return FolderStateCodec.marker_of(folder_name) is not None


strip_disabled_marker = FolderStateCodec.strip_disabled_marker
apply_disabled_marker = FolderStateCodec.apply_disabled_marker
names_equal_ignoring_state = FolderStateCodec.names_equal_ignoring_state
has_disabled_marker = FolderStateCodec.has_disabled_marker


@dataclass
class ModFolder:
    path: Path
    folder_name: str
    display_name: str
    enabled: bool

    @classmethod
    def from_path(cls, path: Path) -> "ModFolder":
        name = path.name
        return cls(
            path=path,
            folder_name=name,
            display_name=strip_disabled_marker(name),
            enabled=not has_disabled_marker(name),
        )

    @property
    def enabled_name(self) -> str:
        return strip_disabled_marker(self.folder_name)

    @property
    def disabled_name(self) -> str:
        return apply_disabled_marker(self.folder_name)


class ModFolderScanner:
    """Lists the mod folders directly under a mods directory.

    Args:
        mods_path: directory holding one folder per mod

    The scanner only reads directory entries. It does not check that a folder
    really contains a mod and never renames anything.
    """

    def __init__(self, mods_path: Path) -> None:
        self.mods_path = Path(mods_path)

    async def get_mod_folders(self) -> List[ModFolder]:
        """Return every mod folder, sorted by display name."""
        folders: List[ModFolder] = []
        if not self.mods_path.exists():
            logging.warning(
                "ModFolderScanner: mods path does not exist: %s", self.mods_path
            )
            return folders

        async for entry in self._iter_subdirs(self.mods_path):
            folders.append(ModFolder.from_path(entry))

        folders.sort(key=lambda f: (f.display_name.lower(), f.folder_name))
        logging.debug(
            "ModFolderScanner: found %d mod folders in %s",
            len(folders),
            self.mods_path,
        )
        return folders

    async def find_mod_folder(self, name: str) -> Optional[ModFolder]:
        """Return the folder matching ``name`` in either state, or None."""
        for folder in await self.get_mod_folders():
            if names_equal_ignoring_state(folder.folder_name, name):
                return folder
        return None

    async def _iter_subdirs(self, root: Path):
        try:
            for entry in root.iterdir():
                if entry.is_dir():
                    yield entry
        except OSError as exc:
            logging.error("ModFolderScanner: cannot access %s: %s", root, exc)


__all__ = [
    "DISABLED_PREFIX",
    "ALT_DISABLED_PREFIX",
    "FolderStateCodec",
    "ModFolder",
    "ModFolderScanner",
    "strip_disabled_marker",
    "apply_disabled_marker",
    "names_equal_ignoring_state",
    "has_disabled_marker",
    "folder_name_from_path",
]
