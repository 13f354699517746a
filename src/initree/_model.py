"""Typed section views using Pydantic BaseModel.

Subclass ``SectionModel`` and declare fields + a ``Meta`` inner class naming
the section::

    class Server(SectionModel):
        class Meta:
            section = "server"

        host: str = "localhost"
        port: int = 8080
        aliases: list[str] = []
        debug: bool = False

    doc = loads("[server]\\nport=0x1F90\\naliases=a, b\\n")
    cfg = Server.load(doc)
    cfg.port            # 8080, decoded by the int converter
    cfg.aliases         # ["a", "b"]
    cfg.dump(doc)       # writes the fields back into [server]
"""

from __future__ import annotations

import types
from typing import Any, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict

from ._converters import ConverterRegistry, default_registry
from ._section import Section
from ._value import Value

_SEQUENCE_ORIGINS = (list, tuple, set, frozenset)


def _unwrap_optional(annotation: Any) -> Any:
    """``X | None`` -> ``X``; anything else unchanged."""
    if get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _is_sequence(annotation: Any) -> bool:
    return get_origin(_unwrap_optional(annotation)) in _SEQUENCE_ORIGINS


def _decode_field(value: Value, annotation: Any, registry: ConverterRegistry) -> Any:
    """Decode *value* for a field annotated *annotation*.

    Registered scalar types and sequences of them go through the registry;
    anything else is handed to Pydantic as text (or a list of texts).
    """
    annotation = _unwrap_optional(annotation)
    origin = get_origin(annotation)
    if origin in _SEQUENCE_ORIGINS:
        args = [arg for arg in get_args(annotation) if arg is not Ellipsis]
        element = args[0] if len(set(args)) == 1 else None
        if element is not None and registry.supports(element):
            return value.get_vector_as(element)
        return value.elements
    if registry.supports(annotation):
        return value.get_as(annotation)
    return str(value)


class SectionModel(BaseModel):
    """Base class for declarative, typed views of one section."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    class Meta:
        section: str = ""

    @classmethod
    def _section_name(cls, section: str | None) -> str:
        if section is not None:
            return section
        return getattr(cls.Meta, "section", "")

    @classmethod
    def from_section(
        cls,
        section: Section,
        registry: ConverterRegistry | None = None,
    ) -> "SectionModel":
        """Build an instance from the keys of *section*.

        Missing keys, and empty values (``key=``) of non-sequence fields, are
        omitted so that field defaults apply (or Pydantic raises
        ``ValidationError`` for required fields). An empty value of a
        sequence field is an empty sequence.
        """
        active_registry = registry or default_registry
        raw_data: dict[str, Any] = {}
        for field_name, field in cls.model_fields.items():
            key = field.alias or field_name
            value = section.get(key)
            if value is None or not value and not _is_sequence(field.annotation):
                continue
            raw_data[key] = _decode_field(value, field.annotation, active_registry)
        return cls.model_validate(raw_data)

    @classmethod
    def load(
        cls,
        document: Any,
        section: str | None = None,
        registry: ConverterRegistry | None = None,
    ) -> "SectionModel":
        """Read ``Meta.section`` (or *section*) of *document*.

        Raises ``SectionNotFoundError`` if the section does not exist.
        """
        found = document.require_section(cls._section_name(section))
        return cls.from_section(found, registry=registry)

    def to_section(self, registry: ConverterRegistry | None = None) -> Section:
        """Encode every non-``None`` field into a new ``Section``."""
        active_registry = registry or default_registry
        result = Section(registry=active_registry)
        for field_name, field in type(self).model_fields.items():
            data = getattr(self, field_name)
            if data is None:
                continue
            annotation = _unwrap_optional(field.annotation)
            type_ = annotation if active_registry.supports(annotation) else None
            result.set(field.alias or field_name, Value.of(data, type_, registry=active_registry))
        return result

    def dump(self, document: Any, section: str | None = None) -> None:
        """Write the fields into ``Meta.section`` (or *section*) of *document*.

        Keys of the section that are not fields are left untouched.
        """
        target = document[self._section_name(section)]
        for key, value in self.to_section(registry=target.registry).items():
            target.set(key, value)
