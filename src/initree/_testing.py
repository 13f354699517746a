"""Test utilities for converters."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from ._converters import Converter, ConverterRegistry, default_registry


@contextmanager
def override_converter(
    type_: Any,
    converter: Converter,
    registry: ConverterRegistry | None = None,
) -> Iterator[ConverterRegistry]:
    """Temporarily register *converter* for *type_*.

    Usage::

        with override_converter(bool, YesNoConverter()) as registry:
            assert Value(["yes"]).get_as(bool) is True
    """
    active = registry or default_registry
    previous = active.unregister(type_)
    try:
        active.register(type_, converter)
        yield active
    finally:
        active.unregister(type_)
        if previous is not None:
            active.register(type_, previous)
