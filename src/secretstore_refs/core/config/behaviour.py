"""Behaviour flags carried inside a parameter set."""

from __future__ import annotations

from collections.abc import Mapping

from secretstore_refs.core.config.base import BehaviourParameter


def _flag(parameters: Mapping[str, str], parameter: BehaviourParameter) -> bool:
    value = parameters.get(parameter.value)
    if value is None:
        return False
    return value.lower() == "true"


def should_expose_env_parameters(parameters: Mapping[str, str]) -> bool:
    """Return ``True`` if resolved values should be written as environment variables."""
    return _flag(parameters, BehaviourParameter.EXPOSE_ENV)


def should_expose_config_parameters(parameters: Mapping[str, str]) -> bool:
    """Return ``True`` if resolved values should be written as configuration parameters."""
    return _flag(parameters, BehaviourParameter.EXPOSE_CONFIG)
