"""
Command line interface for skinmod.

Run it as ``skinmod`` (console script) or ``python -m skinmod``::

    skinmod status "DISABLED_Cool Skin"
    skinmod disable "Cool Skin"
    skinmod same "D:/Mods/DISABLED_Foo" "foo" --paths
    skinmod scan --mods-path D:/Mods
    skinmod keyswaps "D:/Mods/Cool Skin"
    skinmod config set mods_path D:/Mods

Global flags:
- --settings PATH : settings JSON file (default: $SKINMOD_SETTINGS_PATH or ./settings.json)
- --debug         : verbose logging on stderr

Exit codes: 0 success, 1 negative answer (names differ, nothing found),
2 usage or unexpected error.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
from pathlib import Path
from typing import List, Optional

from .config import (
    SETTING_KEYS,
    ModManagerConfig,
    load_config,
    settings_path,
)
from .folders import (
    ModFolderScanner,
    apply_disabled_marker,
    folder_name_from_path,
    has_disabled_marker,
    names_equal_ignoring_state,
    strip_disabled_marker,
)
from .ini_parser import KeySwapReader
from .logging_config import setup_logging
from .settings import LocalSettingsStore


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="skinmod",
        description="Inspect mod folder state and key swap configuration",
    )
    p.add_argument(
        "--settings",
        dest="settings_path",
        default=None,
        help="Path to the settings JSON (default: ./settings.json)",
    )
    p.add_argument(
        "--debug", action="store_true", help="Log debug output to stderr"
    )
    sub = p.add_subparsers(dest="command", required=True)

    status = sub.add_parser("status", help="Show whether a folder name is disabled")
    status.add_argument("name")
    status.add_argument(
        "--path", action="store_true", help="Treat NAME as a path and use its last segment"
    )

    disable = sub.add_parser("disable", help="Print the disabled form of a folder name")
    disable.add_argument("name")

    enable = sub.add_parser("enable", help="Print the enabled form of a folder name")
    enable.add_argument("name")

    same = sub.add_parser("same", help="Compare two folder names ignoring their state")
    same.add_argument("first")
    same.add_argument("second")
    same.add_argument(
        "--paths", action="store_true", help="Compare the last path segments"
    )

    scan = sub.add_parser("scan", help="List mod folders and their state")
    scan.add_argument("--mods-path", dest="mods_path", default=None)

    keyswaps = sub.add_parser("keyswaps", help="Print key swap sections as JSON")
    keyswaps.add_argument("path", help="An .ini file or a mod folder")
    keyswaps.add_argument(
        "--prefix", default=None, help="Section name prefix of key swap sections"
    )

    config = sub.add_parser("config", help="Show or change settings")
    config_sub = config.add_subparsers(dest="config_command", required=True)
    config_sub.add_parser("show")
    config_set = config_sub.add_parser("set")
    config_set.add_argument("key", choices=SETTING_KEYS)
    config_set.add_argument("value")

    return p


def _cmd_status(args: argparse.Namespace) -> int:
    disabled = has_disabled_marker(args.name, absolute_path=args.path)
    name = folder_name_from_path(args.name) if args.path else args.name
    state = "disabled" if disabled else "enabled"
    print(f"{state}\t{strip_disabled_marker(name)}")
    return 0


def _cmd_same(args: argparse.Namespace) -> int:
    equal = names_equal_ignoring_state(
        args.first, args.second, absolute_paths=args.paths
    )
    print("yes" if equal else "no")
    return 0 if equal else 1


async def _cmd_scan(args: argparse.Namespace, config: ModManagerConfig) -> int:
    mods_path = Path(args.mods_path) if args.mods_path else config.mods_path
    folders = await ModFolderScanner(mods_path).get_mod_folders()
    if not folders:
        print(f"No mod folders found in {mods_path}")
        return 1

    for folder in folders:
        mark = "x" if folder.enabled else " "
        print(f"[{mark}] {folder.display_name}")
    return 0


async def _cmd_keyswaps(args: argparse.Namespace, config: ModManagerConfig) -> int:
    reader = KeySwapReader(args.prefix or config.key_section_prefix)
    path = Path(args.path)
    if path.is_dir():
        key_swaps = await reader.read_mod_folder(path)
    else:
        key_swaps = await reader.read_file(path)

    if not key_swaps:
        print(f"No key swap sections found in {path}")
        return 1

    print(json.dumps([k.to_dict() for k in key_swaps], indent=2, ensure_ascii=False))
    return 0


async def _cmd_config(
    args: argparse.Namespace, store: LocalSettingsStore, config: ModManagerConfig
) -> int:
    if args.config_command == "set":
        value = args.value
        if args.key == "debug":
            value = value.strip().lower() in ("1", "true", "yes", "on")
        await store.save_setting(args.key, value)
        logging.info("Saved %s to %s", args.key, store.settings_file)
        return 0

    summary = {
        "settings_file": str(store.settings_file),
        "mods_path": str(config.mods_path),
        "key_section_prefix": config.key_section_prefix,
        "debug": config.debug,
    }
    print(json.dumps(summary, indent=2))
    return 0


async def _run(args: argparse.Namespace) -> int:
    store = LocalSettingsStore(settings_path(args.settings_path))
    await store.load()
    config = await load_config(store)
    if config.debug and not args.debug:
        setup_logging(debug=True)

    if args.command == "status":
        return _cmd_status(args)
    if args.command == "disable":
        print(apply_disabled_marker(args.name))
        return 0
    if args.command == "enable":
        print(strip_disabled_marker(args.name))
        return 0
    if args.command == "same":
        return _cmd_same(args)
    if args.command == "scan":
        return await _cmd_scan(args, config)
    if args.command == "keyswaps":
        return await _cmd_keyswaps(args, config)
    return await _cmd_config(args, store, config)


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(debug=args.debug)
    try:
        return asyncio.run(_run(args))
    except Exception as exc:  # pragma: no cover - top-level script robustness
        logging.debug("skinmod: unhandled error", exc_info=True)
        print(f"Error: {exc}")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
