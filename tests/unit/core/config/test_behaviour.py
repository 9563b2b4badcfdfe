"""Tests for behaviour flags read from parameter sets."""

from __future__ import annotations

import pytest

from secretstore_refs.core.config.base import BehaviourParameter
from secretstore_refs.core.config.behaviour import (
    should_expose_config_parameters,
    should_expose_env_parameters,
)


class TestShouldExposeEnvParameters:
    def test_missing_is_false(self) -> None:
        assert should_expose_env_parameters({}) is False

    @pytest.mark.parametrize("value", ["true", "True", "TRUE"])
    def test_true_any_case(self, value: str) -> None:
        assert should_expose_env_parameters({BehaviourParameter.EXPOSE_ENV.value: value}) is True

    @pytest.mark.parametrize("value", ["false", "yes", "1", "", " true"])
    def test_anything_else_is_false(self, value: str) -> None:
        assert should_expose_env_parameters({BehaviourParameter.EXPOSE_ENV.value: value}) is False


class TestShouldExposeConfigParameters:
    def test_reads_its_own_parameter(self) -> None:
        params = {
            BehaviourParameter.EXPOSE_CONFIG.value: "true",
            BehaviourParameter.EXPOSE_ENV.value: "false",
        }
        assert should_expose_config_parameters(params) is True
        assert should_expose_env_parameters(params) is False

    def test_missing_is_false(self) -> None:
        assert should_expose_config_parameters({"other": "true"}) is False
