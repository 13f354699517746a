"""Line-level INI text codec.

Pure functions shared by ``Document`` for parsing and serializing. Nothing
here holds state; the format constants live in ``IniFormat``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass

_WHITESPACE = " \t\r\n"


@dataclass(frozen=True)
class IniFormat:
    """Configuration for INI parsing and serialization."""

    comment_markers: tuple[str, ...] = (";", "#")
    assignment: str = "="
    delimiter: str = ","  # between values on disk
    encoding: str = "utf-8"
    blank_lines: int = 1  # after each section on save

    def __post_init__(self):
        if not self.comment_markers:
            raise ValueError("comment_markers must not be empty")
        for marker in self.comment_markers:
            if len(marker) != 1:
                raise ValueError(f"comment marker {marker!r} must be a single character")
        if len(self.assignment) != 1:
            raise ValueError("assignment must be a single character")
        if self.assignment in self.comment_markers:
            raise ValueError("assignment must not be a comment marker")
        if len(self.delimiter) != 1:
            raise ValueError("delimiter must be a single character")
        if self.blank_lines < 0:
            raise ValueError("blank_lines must be >= 0")


DEFAULT_FORMAT = IniFormat()


# ---------------------------------------------------------------------------
# String helpers
# ---------------------------------------------------------------------------


def trim(text: str) -> str:
    """Strip spaces, tabs, CR and LF from both ends."""
    return text.strip(_WHITESPACE)


def normalize_name(name: str) -> str:
    """Identity form of a section or key name."""
    return name.lower()


def strip_comment(line: str, markers: Sequence[str] = DEFAULT_FORMAT.comment_markers) -> str:
    """Cut *line* at the earliest comment marker. Not quote-aware."""
    cut = len(line)
    for marker in markers:
        pos = line.find(marker)
        if pos != -1 and pos < cut:
            cut = pos
    return line[:cut]


def split_values(text: str, delimiter: str = DEFAULT_FORMAT.delimiter) -> list[str]:
    """Split on *delimiter* and trim each element.

    An empty string has no elements and an empty trailing element is
    dropped, so ``"a,"`` gives ``["a"]`` while ``"a,,b"`` keeps the
    middle ``""``.
    """
    if not text:
        return []
    parts = text.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return [trim(part) for part in parts]


def join_values(values: Iterable[str], delimiter: str = DEFAULT_FORMAT.delimiter) -> str:
    return delimiter.join(values)


# ---------------------------------------------------------------------------
# Parse / render
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Header:
    """A ``[section]`` line; *name* is already normalized."""

    name: str


@dataclass(frozen=True)
class Entry:
    """A ``key=values`` line; *key* is already normalized."""

    key: str
    values: list[str]


def parse_line(line: str, fmt: IniFormat = DEFAULT_FORMAT) -> Header | Entry | None:
    """Parse one physical line. Blank, comment-only and ``=``-less lines give ``None``."""
    line = trim(strip_comment(line, fmt.comment_markers))
    if not line:
        return None
    if line.startswith("[") and line.endswith("]"):
        return Header(normalize_name(trim(line[1:-1])))
    key, sep, rest = line.partition(fmt.assignment)
    if not sep:
        return None
    return Entry(normalize_name(trim(key)), split_values(trim(rest), fmt.delimiter))


def parse_lines(lines: Iterable[str], fmt: IniFormat = DEFAULT_FORMAT) -> Iterator[Header | Entry]:
    """Yield the ``Header``/``Entry`` events of *lines*, skipping the rest."""
    for line in lines:
        event = parse_line(line, fmt)
        if event is not None:
            yield event


def render(
    sections: Mapping[str, Mapping[str, Sequence[str]]],
    fmt: IniFormat = DEFAULT_FORMAT,
) -> Iterator[str]:
    """Yield newline-terminated lines for *sections* (name -> key -> values)."""
    for name, entries in sections.items():
        yield f"[{name}]\n"
        for key, values in entries.items():
            yield f"{key}{fmt.assignment}{join_values(values, fmt.delimiter)}\n"
        for _ in range(fmt.blank_lines):
            yield "\n"
