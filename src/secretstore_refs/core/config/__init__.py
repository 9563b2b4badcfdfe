"""Configuration models for secretstore-refs.

This package provides dataconf-based configuration models describing the
reference syntax and complete resolution passes in HOCON format.
"""

from secretstore_refs.core.config.base import BehaviourParameter, LogLevel
from secretstore_refs.core.config.behaviour import (
    should_expose_config_parameters,
    should_expose_env_parameters,
)
from secretstore_refs.core.config.loader import load_from_env, load_from_file, load_from_string
from secretstore_refs.core.config.references import (
    DEFAULT_DELIMITER,
    DEFAULT_NAMESPACE_PREFIX,
    ReferenceConfig,
    ResolutionRequest,
)

__all__ = [
    "BehaviourParameter",
    "DEFAULT_DELIMITER",
    "DEFAULT_NAMESPACE_PREFIX",
    "LogLevel",
    "ReferenceConfig",
    "ResolutionRequest",
    "load_from_env",
    "load_from_file",
    "load_from_string",
    "should_expose_config_parameters",
    "should_expose_env_parameters",
]
