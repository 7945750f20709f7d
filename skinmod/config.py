"""
skinmod/config.py

ModManagerConfig and helpers to load it from the environment and the settings store.

Priority for every value:
  1. Environment variables (SKINMOD_MODS_PATH, SKINMOD_KEY_SECTION_PREFIX, SKINMOD_DEBUG)
  2. The settings store (keys: mods_path, key_section_prefix, debug)
  3. Defaults
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .ini_parser import DEFAULT_SECTION_PREFIX
from .settings import SETTINGS_FILE, LocalSettingsStore

DEFAULT_MODS_PATH = os.path.expanduser("~/Documents/Mods")

SETTING_KEYS = ("mods_path", "key_section_prefix", "debug")


@dataclass
class ModManagerConfig:
    """Runtime configuration; plain enough for tests to build directly."""

    mods_path: Path
    key_section_prefix: str = DEFAULT_SECTION_PREFIX
    debug: bool = False


def settings_path(
    cli_path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None
) -> Path:
    """Resolve the settings file: CLI flag, then SKINMOD_SETTINGS_PATH, then ./settings.json."""
    env = os.environ if environ is None else environ
    if cli_path:
        return Path(cli_path).expanduser()
    if env.get("SKINMOD_SETTINGS_PATH"):
        return Path(env["SKINMOD_SETTINGS_PATH"]).expanduser()
    return SETTINGS_FILE


def _as_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


async def load_config(
    store: LocalSettingsStore, environ: Optional[Mapping[str, str]] = None
) -> ModManagerConfig:
    env = os.environ if environ is None else environ

    mods_path = env.get("SKINMOD_MODS_PATH") or await store.read_setting(
        "mods_path", DEFAULT_MODS_PATH
    )
    prefix = env.get("SKINMOD_KEY_SECTION_PREFIX") or await store.read_setting(
        "key_section_prefix", DEFAULT_SECTION_PREFIX
    )
    if "SKINMOD_DEBUG" in env:
        debug = env["SKINMOD_DEBUG"] == "1"
    else:
        debug = _as_bool(await store.read_setting("debug", False))

    return ModManagerConfig(
        mods_path=Path(mods_path).expanduser(),
        key_section_prefix=prefix,
        debug=debug,
    )


async def save_config(store: LocalSettingsStore, config: ModManagerConfig) -> None:
    await store.save_setting("mods_path", str(config.mods_path))
    await store.save_setting("key_section_prefix", config.key_section_prefix)
    await store.save_setting("debug", config.debug)


__all__ = [
    "ModManagerConfig",
    "DEFAULT_MODS_PATH",
    "SETTING_KEYS",
    "settings_path",
    "load_config",
    "save_config",
]
