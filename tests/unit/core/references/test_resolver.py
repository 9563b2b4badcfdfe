"""Tests for substituting secret references."""

from __future__ import annotations

import pytest

from secretstore_refs.core.config.references import ReferenceConfig
from secretstore_refs.core.references.base import UNCHANGED, Unchanged
from secretstore_refs.core.references.resolver import ReferenceResolver, resolve
from tests.factories import make_reference_config


# ---------------------------------------------------------------------------
# resolve
# ---------------------------------------------------------------------------


class TestResolve:
    def test_substitutes_mapped_reference(self) -> None:
        result = resolve("db.password=%prefix.dbPass%", {"dbPass": "s3cr3t"}, make_reference_config())
        assert result == "db.password=s3cr3t"

    def test_no_references_is_unchanged(self) -> None:
        assert resolve("no refs here", {}, make_reference_config()) is UNCHANGED

    def test_out_of_scope_reference_kept(self) -> None:
        result = resolve("a=%prefix.x% b=%other.y%", {"x": "1", "other.y": "2"}, make_reference_config())
        assert result == "a=1 b=%other.y%"

    def test_missing_key_is_unchanged(self) -> None:
        assert resolve("a=%prefix.missing%", {}, make_reference_config()) is UNCHANGED

    def test_partial_mapping_keeps_missing_syntax(self) -> None:
        result = resolve("%prefix.a%/%prefix.b%", {"a": "1"}, make_reference_config())
        assert result == "1/%prefix.b%"

    def test_empty_string_is_unchanged(self) -> None:
        assert resolve("", {"a": "1"}, make_reference_config()) is UNCHANGED

    def test_replacement_equal_to_reference_is_unchanged(self) -> None:
        assert resolve("%prefix.a%", {"a": "%prefix.a%"}, make_reference_config()) is UNCHANGED

    def test_empty_secret_value_is_substituted(self) -> None:
        assert resolve("x=%prefix.a%", {"a": ""}, make_reference_config()) == "x="

    def test_substituted_value_is_not_resolved_again(self) -> None:
        mapping = {"a": "%prefix.b%", "b": "deep"}
        assert resolve("%prefix.a%", mapping, make_reference_config()) == "%prefix.b%"

    def test_secret_value_copied_verbatim(self) -> None:
        secret = "p@ss%%w\\o\"rd\n$HOME"
        assert resolve("%prefix.a%", {"a": secret}, make_reference_config()) == secret

    def test_literal_text_copied_verbatim(self) -> None:
        value = "100%% été %prefix.a% \t50% "
        assert resolve(value, {"a": "x"}, make_reference_config()) == "100%% été x \t50% "

    def test_keys_are_case_sensitive(self) -> None:
        assert resolve("%prefix.A%", {"a": "1"}, make_reference_config()) is UNCHANGED
        assert resolve("%PREFIX.a%", {"a": "1"}, make_reference_config()) is UNCHANGED

    @pytest.mark.parametrize("value", ["%", "%%", "%prefix.a", "prefix.a%", "%prefix. a%", "%%prefix.a%%"])
    def test_malformed_input_is_unchanged(self, value: str) -> None:
        assert resolve(value, {"a": "1"}, make_reference_config()) is UNCHANGED

    def test_default_config(self) -> None:
        assert resolve("%vault:kv/app!/token%", {"kv/app!/token": "t"}) == "t"


class TestUnchanged:
    def test_sentinel_is_singleton(self) -> None:
        assert Unchanged.UNCHANGED is UNCHANGED

    def test_sentinel_is_not_a_string(self) -> None:
        assert not isinstance(UNCHANGED, str)
        assert UNCHANGED != ""

    def test_repr(self) -> None:
        assert repr(UNCHANGED) == "UNCHANGED"


# ---------------------------------------------------------------------------
# ReferenceResolver
# ---------------------------------------------------------------------------


class TestReferenceResolver:
    def test_binds_config(self) -> None:
        config = ReferenceConfig(namespace_prefix="secretstore.", delimiter="#")
        resolver = ReferenceResolver(config)

        assert resolver.config is config
        assert resolver.extract("#secretstore.a# #other#") == ["a"]
        assert resolver.resolve("#secretstore.a#", {"a": "1"}) == "1"
        assert resolver.resolve("%secretstore.a%", {"a": "1"}) is UNCHANGED

    def test_scan(self) -> None:
        resolver = ReferenceResolver(make_reference_config())

        references, keys = resolver.scan({"k": "%prefix.a%", "j": "%prefix.b%", "i": "x"})

        assert references == {"a", "b"}
        assert keys == {"k", "j"}

    def test_default_config(self) -> None:
        assert ReferenceResolver().config == ReferenceConfig()
