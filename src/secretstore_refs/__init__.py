"""Resolve secret-store references embedded in configuration parameters."""

from secretstore_refs.core.config import ReferenceConfig
from secretstore_refs.core.references import (
    UNCHANGED,
    ReferenceGrammarAdapter,
    ReferenceResolver,
    ResolutionReport,
    ScanResult,
    Unchanged,
    extract,
    resolve,
    resolve_parameters,
    scan,
)

__all__ = [
    "ReferenceConfig",
    "ReferenceGrammarAdapter",
    "ReferenceResolver",
    "ResolutionReport",
    "ScanResult",
    "UNCHANGED",
    "Unchanged",
    "extract",
    "resolve",
    "resolve_parameters",
    "scan",
]
