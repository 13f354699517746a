"""In-memory INI documents with case-insensitive lookup and typed values.

Sections hold keys, keys hold one or more string values, and a converter
registry turns those strings into booleans, integers, floats, characters
or any type a caller registers.
"""

from ._codec import DEFAULT_FORMAT, IniFormat, join_values, split_values, strip_comment, trim
from ._converters import (
    Char,
    Converter,
    ConverterRegistry,
    Long,
    Short,
    default_registry,
    register_converter,
)
from ._document import Document, loads
from ._model import SectionModel
from ._section import Section
from ._testing import override_converter
from ._types import (
    UNDEFINED,
    ConversionError,
    EmptyValueError,
    IndexOutOfBoundsError,
    IniError,
    KeyNotFoundError,
    SectionNotFoundError,
    UnsupportedTypeError,
)
from ._value import Value
from ._version import __version__

__all__ = [
    "__version__",
    # Data model
    "Document",
    "Section",
    "Value",
    "loads",
    # Format
    "IniFormat",
    "DEFAULT_FORMAT",
    "trim",
    "strip_comment",
    "split_values",
    "join_values",
    # Conversion
    "Converter",
    "ConverterRegistry",
    "default_registry",
    "register_converter",
    "Char",
    "Short",
    "Long",
    # Typed sections
    "SectionModel",
    # Errors
    "UNDEFINED",
    "IniError",
    "KeyNotFoundError",
    "SectionNotFoundError",
    "IndexOutOfBoundsError",
    "ConversionError",
    "EmptyValueError",
    "UnsupportedTypeError",
    # Testing
    "override_converter",
]
