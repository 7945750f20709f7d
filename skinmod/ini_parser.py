"""
skinmod/ini_parser.py

Key-swap configuration parsing for mod .ini files.

Provides:
- SkinModKeySwap dataclass (one parsed key-swap section)
- KeySwapBlockParser with static line helpers and `parse_key_swap()`
- split_sections() to cut a whole document into (header, body) pairs
- KeySwapReader with async `read_file()` / `read_mod_folder()`

Malformed lines are ignored and a section without any recognised key yields
None instead of an error.

Key names are matched with a case-insensitive prefix test, so no key name may
be a prefix of another one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import aiofiles

FORWARD_INI_KEY = "key_forward"
BACKWARD_INI_KEY = "key_backward"
TYPE_INI_KEY = "key_type"
SWAP_VAR_INI_KEY = "key_swapvar"

DEFAULT_SECTION_PREFIX = "Key"
IGNORED_INI_FILES = {"desktop.ini"}


@dataclass(frozen=True)
class SkinModKeySwap:
    section_key: str
    forward_hotkey: Optional[str] = None
    backward_hotkey: Optional[str] = None
    type: Optional[str] = None
    swap_var: Optional[Tuple[str, ...]] = None

    def __post_init__(self) -> None:
        # Lists are accepted on construction; the record keeps a tuple
        if self.swap_var is not None and not isinstance(self.swap_var, tuple):
            object.__setattr__(self, "swap_var", tuple(self.swap_var))

    def any_values(self) -> bool:
        return any(
            value is not None
            for value in (
                self.forward_hotkey,
                self.backward_hotkey,
                self.type,
                self.swap_var,
            )
        )

    def to_ini_lines(self) -> List[str]:
        """Serialize back to ini lines: the section header, then one line per set field.

        A bare section key is written as ``[key]``, so only records whose key
        is already bracketed parse back to an equal record.
        """
        header = self.section_key
        if not (header.startswith("[") and header.endswith("]")):
            header = f"[{header}]"

        swap_var = ",".join(self.swap_var) if self.swap_var is not None else None
        lines = [header]
        for key, value in (
            (FORWARD_INI_KEY, self.forward_hotkey),
            (BACKWARD_INI_KEY, self.backward_hotkey),
            (TYPE_INI_KEY, self.type),
            (SWAP_VAR_INI_KEY, swap_var),
        ):
            line = format_ini_key(key, value)
            if line is not None:
                lines.append(line)
        return lines

    def to_dict(self) -> Dict[str, object]:
        return {
            "section_key": self.section_key,
            "forward_hotkey": self.forward_hotkey,
            "backward_hotkey": self.backward_hotkey,
            "type": self.type,
            "swap_var": list(self.swap_var) if self.swap_var is not None else None,
        }


class KeySwapBlockParser:
    """Line helpers for INI-like mod configuration files."""

    @staticmethod
    def parse_key_swap(
        file_lines: Iterable[str], section_line: str
    ) -> Optional[SkinModKeySwap]:
        """Extract one key-swap record from the lines following a section header.

        Scanning stops at the next section header, which is not consumed.
        Returns None when no recognised key carried a value.
        """
        forward = backward = swap_type = None
        swap_var: Optional[Tuple[str, ...]] = None

        for line in file_lines:
            if KeySwapBlockParser.is_comment(line):
                continue

            if KeySwapBlockParser.is_ini_key(line, FORWARD_INI_KEY):
                forward = KeySwapBlockParser.get_ini_value(line)

            elif KeySwapBlockParser.is_ini_key(line, BACKWARD_INI_KEY):
                backward = KeySwapBlockParser.get_ini_value(line)

            elif KeySwapBlockParser.is_ini_key(line, TYPE_INI_KEY):
                swap_type = KeySwapBlockParser.get_ini_value(line)

            elif KeySwapBlockParser.is_ini_key(line, SWAP_VAR_INI_KEY):
                value = KeySwapBlockParser.get_ini_value(line)
                swap_var = tuple(value.split(",")) if value is not None else None

            elif KeySwapBlockParser.is_section(line):
                break

        key_swap = SkinModKeySwap(
            section_key=section_line.strip(),
            forward_hotkey=forward,
            backward_hotkey=backward,
            type=swap_type,
            swap_var=swap_var,
        )
        return key_swap if key_swap.any_values() else None

    @staticmethod
    def get_ini_value(line: str) -> Optional[str]:
        """Return the text after the first ``=``, trimmed.

        Further ``=`` characters are dropped and the pieces around them joined,
        so ``a=b=c`` gives ``bc``. Comments give None, and so does a line
        without ``=``: no value at all rather than an empty string.
        """
        if KeySwapBlockParser.is_comment(line):
            return None

        split = line.split("=")
        if len(split) < 2:
            return None
        return "".join(split[1:]).strip()

    @staticmethod
    def get_ini_key(line: str) -> Optional[str]:
        if KeySwapBlockParser.is_comment(line):
            return None
        return line.split("=")[0].strip()

    @staticmethod
    def is_comment(line: str) -> bool:
        return line.strip().startswith(";")

    @staticmethod
    def is_section(line: str, section_key: Optional[str] = None) -> bool:
        """True for a ``[...]`` header line.

        A line counts only when it both starts with ``[`` and ends with ``]``.
        With ``section_key`` the line must also be ``[section_key]`` or the
        bare key, compared case-insensitively.
        """
        line = line.strip()
        if not (line.startswith("[") and line.endswith("]")):
            return False

        if section_key is None:
            return True
        lowered = line.lower()
        return lowered == f"[{section_key}]".lower() or lowered == section_key.lower()

    @staticmethod
    def is_ini_key(line: str, key: str) -> bool:
        stripped = line.strip()
        return stripped[: len(key)].lower() == key.lower()

    @staticmethod
    def format_ini_key(key: str, value: Optional[str]) -> Optional[str]:
        return f"{key} = {value}" if value is not None else None


parse_key_swap = KeySwapBlockParser.parse_key_swap
get_ini_value = KeySwapBlockParser.get_ini_value
get_ini_key = KeySwapBlockParser.get_ini_key
is_comment = KeySwapBlockParser.is_comment
is_section = KeySwapBlockParser.is_section
is_ini_key = KeySwapBlockParser.is_ini_key
format_ini_key = KeySwapBlockParser.format_ini_key


def split_sections(lines: Sequence[str]) -> List[Tuple[str, List[str]]]:
    """Cut a document into (header, body lines) pairs; text before the first header is dropped."""
    sections: List[Tuple[str, List[str]]] = []
    for line in lines:
        if is_section(line):
            sections.append((line.strip(), []))
        elif sections:
            sections[-1][1].append(line)
    return sections


def _section_name(header: str) -> str:
    return header.strip().lstrip("[").rstrip("]").strip()


class KeySwapReader:
    """Reads every key-swap section of a mod's ini files.

    Args:
        section_prefix: a section is a key-swap section when its name starts
            with this text (case-insensitive), e.g. ``[KeySwap]``.
    """

    def __init__(self, section_prefix: str = DEFAULT_SECTION_PREFIX) -> None:
        self.section_prefix = section_prefix

    def is_key_swap_section(self, header: str) -> bool:
        return _section_name(header).lower().startswith(self.section_prefix.lower())

    def read_lines(self, lines: Sequence[str]) -> List[SkinModKeySwap]:
        key_swaps: List[SkinModKeySwap] = []
        for header, body in split_sections(lines):
            if not self.is_key_swap_section(header):
                continue
            key_swap = parse_key_swap(body, header)
            if key_swap is not None:
                key_swaps.append(key_swap)
        return key_swaps

    async def read_file(self, ini_path: Path) -> List[SkinModKeySwap]:
        """Parse one ini file. Unreadable files are logged and give an empty list.

        A leading UTF-8 byte order mark is dropped.
        """
        try:
            async with aiofiles.open(
                ini_path, "r", encoding="utf-8-sig", errors="ignore"
            ) as f:
                content = await f.read()
        except OSError as exc:
            logging.error("KeySwapReader: cannot read %s: %s", ini_path, exc)
            return []

        key_swaps = self.read_lines(content.splitlines())
        logging.debug(
            "KeySwapReader: %d key swap sections in %s", len(key_swaps), ini_path
        )
        return key_swaps

    async def read_mod_folder(self, folder: Path) -> List[SkinModKeySwap]:
        """Parse every ini file directly inside a mod folder, in name order."""
        key_swaps: List[SkinModKeySwap] = []
        for ini_path in self._find_ini_files(Path(folder)):
            key_swaps.extend(await self.read_file(ini_path))
        return key_swaps

    def _find_ini_files(self, folder: Path) -> List[Path]:
        try:
            return sorted(
                f
                for f in folder.iterdir()
                if f.is_file()
                and f.suffix.lower() == ".ini"
                and f.name.lower() not in IGNORED_INI_FILES
            )
        except OSError as exc:
            logging.error("KeySwapReader: cannot list %s: %s", folder, exc)
            return []


__all__ = [
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
]
