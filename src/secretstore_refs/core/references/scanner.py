"""Discovery of secret-store references across a parameter set."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from secretstore_refs.core.config.references import ReferenceConfig
from secretstore_refs.core.references.base import ParameterSet
from secretstore_refs.core.references.extractor import extract


@dataclass(frozen=True)
class ScanResult:
    """Secret keys needed by a parameter set.

    Unpacks as ``references, keys_with_references``.

    Args:
        references: Distinct secret keys, without namespace prefix.
        keys_with_references: Names of parameters holding at least one
            secret reference.
    """

    references: frozenset[str] = field(default_factory=frozenset)
    keys_with_references: frozenset[str] = field(default_factory=frozenset)

    def __iter__(self) -> Iterator[frozenset[str]]:
        return iter((self.references, self.keys_with_references))

    @property
    def is_empty(self) -> bool:
        """Return ``True`` if no secret reference was found."""
        return not self.references


def scan(parameters: ParameterSet, config: ReferenceConfig | None = None) -> ScanResult:
    """Collect every secret reference used by *parameters*.

    Args:
        parameters: Parameter name to raw value.
        config: Reference syntax. Defaults to :class:`ReferenceConfig`.

    Returns:
        The distinct referenced keys and the parameters referencing them.
    """
    config = config or ReferenceConfig()
    references: set[str] = set()
    keys: set[str] = set()
    for name, value in parameters.items():
        found = extract(value, config)
        if found:
            keys.add(name)
            references.update(found)
    return ScanResult(frozenset(references), frozenset(keys))
