"""
File utilities for craftenv CLI.

This module provides the small file operations the provisioning run needs:
appending a line, checking for a line, and literal text replacement.
"""

import os
from pathlib import Path
from typing import Mapping

from .logging import log_info


def line_in_file(path: Path, line: str) -> bool:
    """Check whether a file contains a line, ignoring surrounding whitespace.

    Runs of whitespace inside the line are treated as a single space, so
    ``192.168.10.10\tsite.local`` matches ``192.168.10.10 site.local``.
    """
    wanted = " ".join(line.split())
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return any(" ".join(existing.split()) == wanted for existing in f)
    except (FileNotFoundError, PermissionError):
        return False


def missing_final_newline(path: Path) -> bool:
    """Check whether a non-empty file lacks a trailing newline."""
    try:
        with open(path, "rb") as f:
            f.seek(0, os.SEEK_END)
            if f.tell() == 0:
                return False
            f.seek(-1, os.SEEK_END)
            return f.read(1) != b"\n"
    except OSError:
        return False


def format_appended_line(path: Path, line: str) -> str:
    """Text to append so that ``line`` lands on a line of its own."""
    text = line if line.endswith("\n") else line + "\n"
    if missing_final_newline(path):
        text = "\n" + text
    return text


def append_line_to_file(path: Path, line: str) -> None:
    """Append a single line to a file, creating it if needed."""
    text = format_appended_line(path, line)
    with open(path, "a", encoding="utf-8") as f:
        f.write(text)


def replace_literals(text: str, replacements: Mapping[str, str]) -> str:
    """Apply literal replacements in order, first occurrence only."""
    for pattern, replacement in replacements.items():
        text = text.replace(pattern, replacement, 1)
    return text


def replace_in_file(path: Path, replacements: Mapping[str, str]) -> None:
    """Apply literal replacements to a file in place."""
    with open(path, "r", encoding="utf-8", newline="") as f:
        content = f.read()

    replaced = replace_literals(content, replacements)

    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(replaced)
    log_info(f"Updated {len(replacements)} value(s) in {path}")
