"""Core types shared by the reference scanner, extractor and resolver."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Union

ParameterSet = Mapping[str, str]
"""Parameter name to raw value."""

SecretMapping = Mapping[str, str]
"""Secret key, without namespace prefix, to secret value."""


class Unchanged(Enum):
    """Marker returned when resolution leaves a value untouched.

    Callers compare against :data:`UNCHANGED` with ``is`` to skip
    redundant downstream writes.
    """

    UNCHANGED = "unchanged"

    def __repr__(self) -> str:
        return "UNCHANGED"


UNCHANGED = Unchanged.UNCHANGED

ResolutionOutcome = Union[str, Unchanged]
