"""Substitution of secret-store references with fetched secret values."""

from __future__ import annotations

from secretstore_refs.core.config.references import ReferenceConfig
from secretstore_refs.core.references.base import (
    UNCHANGED,
    ParameterSet,
    ResolutionOutcome,
    SecretMapping,
)
from secretstore_refs.core.references.extractor import extract
from secretstore_refs.core.references.grammar import ReferenceGrammarAdapter
from secretstore_refs.core.references.scanner import ScanResult, scan


def resolve(
    value: str,
    mapping: SecretMapping,
    config: ReferenceConfig | None = None,
) -> ResolutionOutcome:
    """Replace secret references in *value* with their secret values.

    A reference is replaced only when its key is in the secret namespace
    and its stripped key is present in *mapping*. Every other reference
    keeps its original characters, and literal text is copied as is.
    Substituted values are not scanned again.

    Args:
        value: Parameter value to resolve.
        mapping: Secret key, without namespace prefix, to secret value.
        config: Reference syntax. Defaults to :class:`ReferenceConfig`.

    Returns:
        The resolved string, or :data:`UNCHANGED` if it equals *value*.
    """
    config = config or ReferenceConfig()
    grammar = ReferenceGrammarAdapter(config.delimiter)
    if config.namespace_prefix not in value or not grammar.may_contain_reference(value):
        return UNCHANGED

    def accept(key: str) -> str | None:
        if not config.is_in_scope(key):
            return None
        return mapping.get(config.strip_prefix(key))

    resolved = grammar.decompose(value, accept)
    if resolved == value:
        return UNCHANGED
    return resolved


class ReferenceResolver:
    """Scanner, extractor and resolver bound to one reference syntax.

    Args:
        config: Reference syntax. Defaults to :class:`ReferenceConfig`.
    """

    def __init__(self, config: ReferenceConfig | None = None) -> None:
        self._config = config or ReferenceConfig()

    @property
    def config(self) -> ReferenceConfig:
        """Return the reference syntax configuration."""
        return self._config

    def scan(self, parameters: ParameterSet) -> ScanResult:
        return scan(parameters, self._config)

    def extract(self, value: str) -> list[str]:
        return extract(value, self._config)

    def resolve(self, value: str, mapping: SecretMapping) -> ResolutionOutcome:
        return resolve(value, mapping, self._config)
