"""Extraction of secret-store reference keys from a single value."""

from __future__ import annotations

from secretstore_refs.core.config.references import ReferenceConfig
from secretstore_refs.core.references.grammar import ReferenceGrammarAdapter


def extract(value: str, config: ReferenceConfig | None = None) -> list[str]:
    """Return the secret keys referenced by *value*.

    Keys are returned without the namespace prefix, in the order they
    appear, duplicates included. References outside the secret namespace
    are ignored.

    Args:
        value: Parameter value to inspect.
        config: Reference syntax. Defaults to :class:`ReferenceConfig`.

    Returns:
        Referenced secret keys; empty when there are none.

    Example:
        >>> extract("%vault:db!/user%:%vault:db!/password%")
        ['db!/user', 'db!/password']
    """
    config = config or ReferenceConfig()
    if config.namespace_prefix not in value:
        return []
    grammar = ReferenceGrammarAdapter(config.delimiter)
    return [
        config.strip_prefix(key)
        for key in grammar.reference_keys(value)
        if config.is_in_scope(key)
    ]
