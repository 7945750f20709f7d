# skinmod/settings.py
"""
Local settings for skinmod, kept as one JSON object on disk.

LocalSettingsStore is the key/value store the config layer and the CLI read
from and write to. Values are anything `json` can encode; each write rewrites
the whole file.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Dict

import aiofiles

SETTINGS_FILE = Path("settings.json")

__all__ = ["LocalSettingsStore", "SETTINGS_FILE"]


class LocalSettingsStore:
    """Key/value settings backed by a JSON file.

    Usage:
        store = LocalSettingsStore(Path("settings.json"))
        await store.load()
        await store.save_setting("mods_path", "D:/Mods")
        mods_path = await store.read_setting("mods_path", "~/Documents/Mods")

    Reads are served from memory after `load()`. Writers hold an asyncio lock
    so two settings saved together never interleave on disk.
    """

    def __init__(self, settings_file: Path = SETTINGS_FILE) -> None:
        self.settings_file: Path = Path(settings_file)
        self._settings: Dict[str, Any] = {}
        self._lock = asyncio.Lock()

    async def load(self) -> None:
        """Replace the in-memory settings with the file's contents.

        No file means no settings yet. A file that is not a JSON object is
        reported and ignored, leaving the store empty.
        """
        if not self.settings_file.exists():
            logging.debug(
                "LocalSettingsStore: no settings file at %s yet", self.settings_file
            )
            return

        try:
            async with aiofiles.open(self.settings_file, "r", encoding="utf-8") as f:
                content = await f.read()
            data = json.loads(content) if content.strip() else {}
            if not isinstance(data, dict):
                raise ValueError("top-level JSON value is not an object")
            self._settings = data
            logging.debug(
                "LocalSettingsStore: read %d settings (%s) from %s",
                len(self._settings),
                ", ".join(sorted(self._settings)),
                self.settings_file,
            )
        except (OSError, ValueError) as exc:
            logging.warning(
                "LocalSettingsStore: ignoring unreadable settings file %s: %s",
                self.settings_file,
                exc,
            )
            self._settings = {}

    async def save(self) -> None:
        """Write every setting to the settings file, creating its directory.

        A failed write is logged; the in-memory values stay as they are.
        """
        try:
            self.settings_file.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(self.settings_file, "w", encoding="utf-8") as f:
                await f.write(
                    json.dumps(self._settings, indent=2, ensure_ascii=False)
                )
        except OSError as exc:
            logging.error(
                "LocalSettingsStore: could not write settings to %s: %s",
                self.settings_file,
                exc,
            )

    async def read_setting(self, key: str, default: Any = None) -> Any:
        async with self._lock:
            return self._settings.get(key, default)

    async def save_setting(self, key: str, value: Any) -> None:
        async with self._lock:
            self._settings[key] = value
            await self.save()
        logging.debug("LocalSettingsStore: %s = %r", key, value)

    async def remove_setting(self, key: str) -> None:
        """Forget one setting; unknown keys leave the file untouched."""
        async with self._lock:
            if key in self._settings:
                del self._settings[key]
                await self.save()

    async def clear(self) -> None:
        """Forget every setting and delete the settings file."""
        async with self._lock:
            self._settings.clear()
            try:
                self.settings_file.unlink()
                logging.info(
                    "LocalSettingsStore: deleted settings file %s", self.settings_file
                )
            except FileNotFoundError:
                pass
            except OSError as exc:
                logging.warning(
                    "LocalSettingsStore: could not delete %s: %s",
                    self.settings_file,
                    exc,
                )

    async def to_dict(self) -> Dict[str, Any]:
        """Snapshot of the current settings."""
        async with self._lock:
            return dict(self._settings)
