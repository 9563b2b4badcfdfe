"""Resolution of a whole parameter set.

Ties the core operations together the way a build agent consumes them:
discover referenced keys with :func:`scan`, fetch the secrets out of band,
then call :func:`resolve_parameters` and write back only the parameters
reported in :attr:`ResolutionReport.resolved`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from secretstore_refs.core.config.references import ReferenceConfig
from secretstore_refs.core.references.base import ParameterSet, SecretMapping
from secretstore_refs.core.references.exceptions import UnresolvedReferenceError
from secretstore_refs.core.references.extractor import extract
from secretstore_refs.core.references.resolver import resolve

logger = logging.getLogger(__name__)


@dataclass
class ResolutionReport:
    """Outcome of resolving a parameter set.

    The resolved values are masked in ``__repr__`` to prevent accidental
    leakage in logs or tracebacks.

    Args:
        resolved: Parameter name to new value, for changed parameters only.
        unresolved: Parameter name to secret keys left unresolved.
    """

    resolved: dict[str, str] = field(default_factory=dict)
    unresolved: dict[str, list[str]] = field(default_factory=dict)

    @property
    def has_updates(self) -> bool:
        """Return ``True`` if any parameter changed."""
        return bool(self.resolved)

    @property
    def has_unresolved(self) -> bool:
        """Return ``True`` if any secret reference was left unresolved."""
        return bool(self.unresolved)

    def __repr__(self) -> str:
        masked = {name: "***" for name in self.resolved}
        return f"ResolutionReport(resolved={masked!r}, unresolved={self.unresolved!r})"


def find_unresolved(
    value: str,
    mapping: SecretMapping,
    config: ReferenceConfig | None = None,
) -> list[str]:
    """Return the secret keys referenced by the raw *value* that *mapping* lacks.

    Only the original text is inspected, never the substituted secret values.
    Each key is listed once, in order of first appearance.
    """
    missing = [key for key in extract(value, config) if key not in mapping]
    return list(dict.fromkeys(missing))


def resolve_parameters(
    parameters: ParameterSet,
    mapping: SecretMapping,
    config: ReferenceConfig | None = None,
    *,
    strict: bool = False,
) -> ResolutionReport:
    """Resolve secret references in every value of *parameters*.

    Args:
        parameters: Parameter name to raw value. Not modified.
        mapping: Secret key, without namespace prefix, to secret value.
        config: Reference syntax. Defaults to :class:`ReferenceConfig`.
        strict: Raise instead of returning when references remain.

    Returns:
        A :class:`ResolutionReport` listing changed and unresolved parameters.

    Raises:
        UnresolvedReferenceError: If *strict* and a secret reference has no
            entry in *mapping*.
    """
    config = config or ReferenceConfig()
    report = ResolutionReport()
    for name, value in parameters.items():
        outcome = resolve(value, mapping, config)
        if isinstance(outcome, str):
            report.resolved[name] = outcome
            logger.debug("Resolved secret references in parameter '%s'", name)
        leftover = find_unresolved(value, mapping, config)
        if leftover:
            report.unresolved[name] = leftover
            for key in leftover:
                logger.warning("Secret reference '%s' in parameter '%s' was not resolved", key, name)

    if strict and report.unresolved:
        raise UnresolvedReferenceError(report.unresolved)
    return report
