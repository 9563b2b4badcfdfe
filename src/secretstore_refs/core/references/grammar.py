"""Decomposition of parameter text into literal and reference spans.

A reference is a key wrapped in a pair of delimiters::

    jdbc:postgresql://db/%vault:db!/user%?ssl=true

The key must be non-empty and must not contain whitespace. A doubled
delimiter (``%%``) is an escaped delimiter and stays literal, as does any
delimiter that does not open a well-formed reference. Decomposition is
total: any input text splits into spans whose concatenation is the input.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from secretstore_refs.core.config.references import DEFAULT_DELIMITER

AcceptReference = Callable[[str], Optional[str]]
"""Maps a reference key to replacement text, or ``None`` to keep it."""


class SpanKind(str, Enum):
    """Kind of a decomposed span."""

    LITERAL = "literal"
    REFERENCE = "reference"


@dataclass(frozen=True)
class Span:
    """A contiguous piece of decomposed text.

    Args:
        kind: Whether the span is literal text or a reference.
        text: The original characters of the span, delimiters included.
        key: Reference key without delimiters (references only).
    """

    kind: SpanKind
    text: str
    key: str | None = None


def _is_valid_key(key: str) -> bool:
    return bool(key) and not any(ch.isspace() for ch in key)


def may_contain_reference(text: str, delimiter: str = DEFAULT_DELIMITER) -> bool:
    """Cheap pre-check: can *text* hold a reference at all?

    Never returns ``False`` for text containing a reference; may return
    ``True`` for text that has none.
    """
    first = text.find(delimiter)
    return first != -1 and text.find(delimiter, first + 1) != -1


def iter_spans(text: str, delimiter: str = DEFAULT_DELIMITER) -> Iterator[Span]:
    """Yield the literal and reference spans of *text* in order."""
    literal_start = 0
    pos = 0
    while True:
        start = text.find(delimiter, pos)
        if start == -1:
            break
        if text.startswith(delimiter, start + 1):
            pos = start + 2
            continue
        end = text.find(delimiter, start + 1)
        if end == -1:
            break
        key = text[start + 1:end]
        if not _is_valid_key(key):
            # closing delimiter may still open the next reference
            pos = end
            continue
        if start > literal_start:
            yield Span(SpanKind.LITERAL, text[literal_start:start])
        yield Span(SpanKind.REFERENCE, text[start:end + 1], key)
        literal_start = pos = end + 1
    if literal_start < len(text):
        yield Span(SpanKind.LITERAL, text[literal_start:])


def decompose(
    text: str,
    accept_reference: AcceptReference,
    delimiter: str = DEFAULT_DELIMITER,
) -> str:
    """Rebuild *text*, letting *accept_reference* replace reference spans.

    Literal spans are copied unchanged. For each reference span,
    *accept_reference* receives the key; returning ``None`` keeps the
    original reference characters, returning a string substitutes it
    verbatim.

    Args:
        text: Text to decompose.
        accept_reference: Replacement callback.
        delimiter: Reference delimiter character.

    Returns:
        The rebuilt text.
    """
    parts: list[str] = []
    for span in iter_spans(text, delimiter):
        if span.kind is SpanKind.REFERENCE and span.key is not None:
            replacement = accept_reference(span.key)
            parts.append(span.text if replacement is None else replacement)
        else:
            parts.append(span.text)
    return "".join(parts)


class ReferenceGrammarAdapter:
    """Reference grammar bound to a single delimiter.

    Args:
        delimiter: Character opening and closing a reference.
            Defaults to ``"%"``.
    """

    def __init__(self, delimiter: str = DEFAULT_DELIMITER) -> None:
        if len(delimiter) != 1:
            raise ValueError("delimiter must be exactly one character")
        self._delimiter = delimiter

    @property
    def delimiter(self) -> str:
        """Return the reference delimiter."""
        return self._delimiter

    def may_contain_reference(self, text: str) -> bool:
        return may_contain_reference(text, self._delimiter)

    def iter_spans(self, text: str) -> Iterator[Span]:
        return iter_spans(text, self._delimiter)

    def decompose(self, text: str, accept_reference: AcceptReference) -> str:
        return decompose(text, accept_reference, self._delimiter)

    def reference_keys(self, text: str) -> list[str]:
        """Return every reference key in *text*, in order."""
        if not self.may_contain_reference(text):
            return []
        return [
            span.key
            for span in self.iter_spans(text)
            if span.kind is SpanKind.REFERENCE and span.key is not None
        ]

    def literal_text(self, text: str) -> str:
        """Return *text* with every reference span removed."""
        return "".join(span.text for span in self.iter_spans(text) if span.kind is SpanKind.LITERAL)
