"""Utility functions for the N2H exporter."""

import os
import re
from pathlib import Path
from typing import Generator, Iterable, List, Optional, TextIO, Union

# Character classes are ASCII-only and \Z is the true end of string.

# Matches "202102012138 note title.md" and "202102012138.md".
NOTE_NAME_RE = re.compile(r"^([0-9]{12}).*\.md\Z", re.ASCII)
# Matches the line with tags.
TAG_LINE_RE = re.compile(r"^Tags: ")
# Matches one tag without the pound sign.
ONE_TAG_RE = re.compile(r"#(\S+)\s*", re.ASCII)
# Matches the level 1 heading used as title.
TITLE_LINE_RE = re.compile(r"^#\s(.*)\Z", re.ASCII)

# Bytes that aren't UTF-8 round-trip through surrogates.
NOTE_ENCODING = "utf-8"
NOTE_ERRORS = "surrogateescape"


def open_note(path: Union[str, Path], mode: str = "r") -> TextIO:
    """Open a note or page for line-oriented text I/O.

    Only LF ends a line, nothing is translated, and undecodable bytes are
    written back unchanged.
    """
    return open(path, mode, encoding=NOTE_ENCODING, errors=NOTE_ERRORS, newline="\n")


def note_id_from_filename(filename: str) -> Optional[str]:
    """Return the 12-digit note id of a note file name.

    Args:
        filename: Bare file name, without directory

    Returns:
        Note id, or None if the name is not a note name
    """
    match = NOTE_NAME_RE.match(filename)
    if match is None:
        return None
    return match.group(1)


def is_note_filename(filename: str) -> bool:
    return note_id_from_filename(filename) is not None


def note_date(note_id: str) -> str:
    """Format the date part of a note id as YYYY-MM-DD."""
    return f"{note_id[:4]}-{note_id[4:6]}-{note_id[6:8]}"


def is_tag_line(line: str) -> bool:
    return TAG_LINE_RE.match(line) is not None


def strip_line_ending(line: str) -> str:
    """Remove a trailing LF, then one trailing CR."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def tags_from_lines(lines: Iterable[str]) -> List[str]:
    """Extract tags from the first tag line.

    Tags keep their order of appearance, duplicates included.
    """
    for line in lines:
        line = strip_line_ending(line)
        if not is_tag_line(line):
            continue
        return ONE_TAG_RE.findall(line)
    return []


def tags_from_file(note_path: Union[str, Path]) -> List[str]:
    """Read a note and return the tags of its tag line.

    Raises:
        OSError: If the note can't be opened or read
    """
    with open_note(note_path) as f:
        return tags_from_lines(f)


def slug_from_title(title: str) -> str:
    """Convert a note title to a URL slug.

    Spaces and hyphens become hyphens, ``+`` becomes ``p``, letters, digits
    and underscores are kept, anything else is dropped. Everything from the
    first colon on is a subtitle and is left out.

    >>> slug_from_title("C++ Things: Part 1")
    'cpp-things'
    """
    chars = []
    for ch in title.strip().lower():
        if ch == ":":
            break
        if ch in (" ", "-"):
            chars.append("-")
        elif ch == "+":
            chars.append("p")
        elif ch == "_" or ch.isalpha() or ch.isdecimal():
            chars.append(ch)
    return "".join(chars)


def yield_note_files(notes_dir: Union[str, Path]) -> Generator[Path, None, None]:
    """Yield note files directly inside a directory, sorted by name.

    Subdirectories and files that don't follow the note naming scheme are
    left out.

    Raises:
        OSError: If the directory can't be listed
    """
    with os.scandir(notes_dir) as it:
        entries = sorted(it, key=lambda entry: entry.name)

    for entry in entries:
        if entry.is_dir():
            continue
        if not is_note_filename(entry.name):
            continue
        yield Path(entry.path)
