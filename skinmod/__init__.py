"""
skinmod package

Folder-name state handling and key swap parsing for skin mod folders.

This module re-exports the primary classes and helpers from the submodules so
callers can import from `skinmod` directly (e.g. `from skinmod import KeySwapReader`).
"""

from .folders import (
    ALT_DISABLED_PREFIX,
    DISABLED_PREFIX,
    FolderStateCodec,
    folder_name_from_path,
    ModFolder,
    ModFolderScanner,
    apply_disabled_marker,
    has_disabled_marker,
    names_equal_ignoring_state,
    strip_disabled_marker,
)
from .ini_parser import (
    BACKWARD_INI_KEY,
    FORWARD_INI_KEY,
    SWAP_VAR_INI_KEY,
    TYPE_INI_KEY,
    KeySwapBlockParser,
    KeySwapReader,
    SkinModKeySwap,
    format_ini_key,
    get_ini_key,
    get_ini_value,
    is_comment,
    is_ini_key,
    is_section,
    parse_key_swap,
    split_sections,
)
from .settings import LocalSettingsStore, SETTINGS_FILE
from .config import ModManagerConfig, load_config, save_config, settings_path

__all__ = [
    # folders
    "DISABLED_PREFIX",
    "ALT_DISABLED_PREFIX",
    "FolderStateCodec",
    "folder_name_from_path",
    "ModFolder",
    "ModFolderScanner",
    "strip_disabled_marker",
    "apply_disabled_marker",
    "names_equal_ignoring_state",
    "has_disabled_marker",
    # ini parser
    "FORWARD_INI_KEY",
    "BACKWARD_INI_KEY",
    "TYPE_INI_KEY",
    "SWAP_VAR_INI_KEY",
    "SkinModKeySwap",
    "KeySwapBlockParser",
    "KeySwapReader",
    "split_sections",
    "parse_key_swap",
    "get_ini_value",
    "get_ini_key",
    "is_comment",
    "is_section",
    "is_ini_key",
    "format_ini_key",
    # settings / config
    "LocalSettingsStore",
    "SETTINGS_FILE",
    "ModManagerConfig",
    "load_config",
    "save_config",
    "settings_path",
]

__version__ = "0.1.0"
