"""Reference syntax configuration models."""

from dataclasses import dataclass, field

DEFAULT_NAMESPACE_PREFIX = "vault:"
DEFAULT_DELIMITER = "%"


@dataclass
class ReferenceConfig:
    """Configuration for recognising secret-store references."""

    namespace_prefix: str = DEFAULT_NAMESPACE_PREFIX
    """Prefix marking a reference key as belonging to the secret store (default: vault:)"""

    delimiter: str = DEFAULT_DELIMITER
    """Single character opening and closing a reference (default: %)"""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.namespace_prefix:
            raise ValueError("namespace_prefix must not be empty")

        if len(self.delimiter) != 1:
            raise ValueError("delimiter must be exactly one character")

        if self.delimiter.isspace():
            raise ValueError("delimiter must not be whitespace")

        if self.delimiter in self.namespace_prefix:
            raise ValueError("namespace_prefix must not contain the delimiter")

    def is_in_scope(self, key: str) -> bool:
        """Return ``True`` if *key* belongs to the secret namespace."""
        return key.startswith(self.namespace_prefix)

    def strip_prefix(self, key: str) -> str:
        """Return *key* without the namespace prefix."""
        return key[len(self.namespace_prefix):]


@dataclass
class ResolutionRequest:
    """A complete resolution pass: parameters, fetched secrets and syntax.

    Secret values are masked in ``__repr__`` to prevent accidental
    leakage in logs or tracebacks.
    """

    parameters: dict[str, str] = field(default_factory=dict)
    """Parameter name to raw value"""

    secrets: dict[str, str] = field(default_factory=dict)
    """Secret key (without namespace prefix) to secret value"""

    references: ReferenceConfig = field(default_factory=ReferenceConfig)
    """Reference syntax configuration"""

    def __repr__(self) -> str:
        masked = {key: "***" for key in self.secrets}
        return (
            f"ResolutionRequest("
            f"parameters={self.parameters!r}, "
            f"secrets={masked!r}, "
            f"references={self.references!r})"
        )
