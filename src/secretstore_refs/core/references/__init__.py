"""Secret reference scanning, extraction and resolution."""

from secretstore_refs.core.references.base import (
    UNCHANGED,
    ParameterSet,
    ResolutionOutcome,
    SecretMapping,
    Unchanged,
)
from secretstore_refs.core.references.exceptions import SecretReferenceError, UnresolvedReferenceError
from secretstore_refs.core.references.extractor import extract
from secretstore_refs.core.references.grammar import (
    ReferenceGrammarAdapter,
    Span,
    SpanKind,
    decompose,
    iter_spans,
    may_contain_reference,
)
from secretstore_refs.core.references.injection import ResolutionReport, find_unresolved, resolve_parameters
from secretstore_refs.core.references.resolver import ReferenceResolver, resolve
from secretstore_refs.core.references.scanner import ScanResult, scan

__all__ = [
    "ParameterSet",
    "ReferenceGrammarAdapter",
    "ReferenceResolver",
    "ResolutionOutcome",
    "ResolutionReport",
    "ScanResult",
    "SecretMapping",
    "SecretReferenceError",
    "Span",
    "SpanKind",
    "UNCHANGED",
    "Unchanged",
    "UnresolvedReferenceError",
    "decompose",
    "extract",
    "find_unresolved",
    "iter_spans",
    "may_contain_reference",
    "resolve",
    "resolve_parameters",
    "scan",
]
