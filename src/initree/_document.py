"""In-memory INI document with file load/save.

Parsing rules (per line):

1. Cut at the first ``;`` or ``#``.
2. Trim spaces, tabs, CR and LF.
3. Skip empty lines.
4. ``[name]`` switches the current section, creating it if new. Lines
   before any header belong to the section named ``""``.
5. ``key=v1, v2`` stores ``["v1", "v2"]`` under ``key``; lines without
   ``=`` are ignored.

Names are lower-cased. Repeated headers keep adding to the same section;
a repeated key replaces the earlier Value.
"""

from __future__ import annotations

import io
import logging
from collections.abc import ItemsView, Iterable, Iterator, KeysView
from os import PathLike
from typing import Any, TypeVar

from ._codec import DEFAULT_FORMAT, Entry, Header, IniFormat, normalize_name, parse_lines, render
from ._converters import ConverterRegistry, default_registry
from ._section import Section
from ._types import UNDEFINED, KeyNotFoundError, SectionNotFoundError, _Undefined
from ._value import Value

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Document:
    """Ordered mapping from normalized section name to ``Section``.

    Sections and keys are saved in insertion order.
    """

    def __init__(
        self,
        *,
        format: IniFormat = DEFAULT_FORMAT,
        registry: ConverterRegistry | None = None,
    ) -> None:
        self.format = format
        self._registry = registry or default_registry
        self._sections: dict[str, Section] = {}

    # -- parsing ------------------------------------------------------------

    def read_lines(self, lines: Iterable[str]) -> None:
        """Merge the entries of *lines* into this document."""
        current: Section | None = None
        for event in parse_lines(lines, self.format):
            if isinstance(event, Header):
                current = self[event.name]
            elif isinstance(event, Entry):
                if current is None:
                    current = self[""]
                current.set(event.key, Value(event.values, registry=self._registry))

    def read_string(self, text: str) -> None:
        self.read_lines(io.StringIO(text, newline=None))

    def load(self, path: str | PathLike[str]) -> bool:
        """Read *path* into this document.

        Returns ``False`` if the file cannot be opened or decoded. Entries
        parsed before a decoding failure are kept.
        """
        try:
            with open(path, "r", encoding=self.format.encoding) as fp:
                self.read_lines(fp)
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Failed to load INI file %s: %s", path, exc)
            return False
        logger.debug("Loaded INI file %s (%d sections)", path, len(self._sections))
        return True

    # -- serialization ------------------------------------------------------

    def iter_lines(self) -> Iterator[str]:
        return render(self._sections, self.format)

    def dumps(self) -> str:
        return "".join(self.iter_lines())

    def save(self, path: str | PathLike[str]) -> bool:
        """Write this document to *path*, truncating it.

        Returns ``False`` if the file cannot be opened or written. No
        temp-file/rename step is taken, so a failure mid-write can leave a
        truncated file.
        """
        try:
            with open(path, "w", encoding=self.format.encoding, newline="\n") as fp:
                fp.writelines(self.iter_lines())
        except (OSError, UnicodeEncodeError) as exc:
            logger.debug("Failed to save INI file %s: %s", path, exc)
            return False
        logger.debug("Saved INI file %s (%d sections)", path, len(self._sections))
        return True

    # -- value access -------------------------------------------------------

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Return the Value at *section*/*key*, or *default* (as-is). Never inserts."""
        found = self._sections.get(normalize_name(section))
        if found is None:
            return default
        return found.get(key, default)

    def get_as(self, section: str, key: str, type_: type[T], default: Any = UNDEFINED) -> T:
        """Typed read of the first element at *section*/*key*.

        *default* is returned as-is, not decoded. Without a default, a
        missing section or key raises ``KeyNotFoundError``.
        """
        value = self.get(section, key)
        if value is None:
            if not isinstance(default, _Undefined):
                return default
            raise KeyNotFoundError(f"{normalize_name(section)}.{normalize_name(key)}")
        return value.get_as(type_)

    def set(self, section: str, key: str, data: Any) -> None:
        """Store *data* under *section*/*key*, creating the section if needed."""
        self[section].set(key, data)

    def has_section(self, section: str) -> bool:
        return normalize_name(section) in self._sections

    def has_key(self, section: str, key: str) -> bool:
        found = self._sections.get(normalize_name(section))
        return found is not None and found.has_key(key)

    def remove_key(self, section: str, key: str) -> bool:
        found = self._sections.get(normalize_name(section))
        return found is not None and found.remove_key(key)

    def key_count(self, section: str) -> int:
        found = self._sections.get(normalize_name(section))
        return 0 if found is None else found.key_count()

    # -- section management -------------------------------------------------

    def add_section(self, section: str) -> bool:
        """Create *section* if absent. Returns ``False`` if it already existed."""
        name = normalize_name(section)
        if name in self._sections:
            return False
        self._sections[name] = Section(registry=self._registry)
        return True

    def require_section(self, section: str) -> Section:
        try:
            return self._sections[normalize_name(section)]
        except KeyError:
            raise SectionNotFoundError(section) from None

    def remove_section(self, section: str) -> bool:
        return self._sections.pop(normalize_name(section), None) is not None

    def clear_section(self, section: str) -> None:
        """Remove every key of *section*, keeping (or creating) the section."""
        self[section].clear()

    def clear(self) -> None:
        self._sections.clear()

    def section_count(self) -> int:
        return len(self._sections)

    def sections(self) -> KeysView[str]:
        return self._sections.keys()

    def items(self) -> ItemsView[str, Section]:
        return self._sections.items()

    # -- mapping protocol ---------------------------------------------------

    def __getitem__(self, section: str) -> Section:
        name = normalize_name(section)
        found = self._sections.get(name)
        if found is None:
            found = self._sections[name] = Section(registry=self._registry)
        return found

    def __setitem__(self, section: str, value: Section) -> None:
        if not isinstance(value, Section):
            raise TypeError(f"expected Section, got {type(value).__name__}")
        self._sections[normalize_name(section)] = value

    def __delitem__(self, section: str) -> None:
        if not self.remove_section(section):
            raise SectionNotFoundError(section)

    def __contains__(self, section: object) -> bool:
        return isinstance(section, str) and self.has_section(section)

    def __iter__(self) -> Iterator[str]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self._sections == other._sections

    __hash__ = None

    def __repr__(self) -> str:
        return f"Document(sections={list(self._sections)!r})"


def loads(
    text: str,
    *,
    format: IniFormat = DEFAULT_FORMAT,
    registry: ConverterRegistry | None = None,
) -> Document:
    """Parse INI *text* into a new ``Document``."""
    document = Document(format=format, registry=registry)
    document.read_string(text)
    return document
