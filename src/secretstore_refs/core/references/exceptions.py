"""Reference-resolution exceptions."""

from __future__ import annotations


class SecretReferenceError(Exception):
    """Base exception for secret reference errors."""

    pass


class UnresolvedReferenceError(SecretReferenceError):
    """In-scope references remained after resolution.

    Only raised by callers that opt into a strict policy; the core
    operations themselves never raise for unresolved references.
    """

    def __init__(self, unresolved: dict[str, list[str]]) -> None:
        self.unresolved = unresolved
        keys = sorted({key for refs in unresolved.values() for key in refs})
        names = sorted(unresolved)
        super().__init__(
            f"Unresolved secret references {', '.join(keys)} in parameters {', '.join(names)}"
        )
