"""Tests for extracting secret reference keys from one value."""

from __future__ import annotations

from secretstore_refs.core.config.references import ReferenceConfig
from secretstore_refs.core.references.extractor import extract
from tests.factories import make_reference_config


class TestExtract:
    def test_single_reference(self) -> None:
        assert extract("%prefix.dbPass%", make_reference_config()) == ["dbPass"]

    def test_duplicates_preserved_in_order(self) -> None:
        value = "%prefix.b% %prefix.a% %prefix.b%"
        assert extract(value, make_reference_config()) == ["b", "a", "b"]

    def test_out_of_scope_references_ignored(self) -> None:
        value = "a=%prefix.x% b=%other.y% c=%env.HOME%"
        assert extract(value, make_reference_config()) == ["x"]

    def test_prefix_must_start_the_key(self) -> None:
        assert extract("%other.prefix.x%", make_reference_config()) == []

    def test_prefix_in_literal_text_is_not_a_reference(self) -> None:
        assert extract("prefix.x and %other%", make_reference_config()) == []

    def test_plain_value(self) -> None:
        assert extract("no refs here", make_reference_config()) == []

    def test_empty_value(self) -> None:
        assert extract("", make_reference_config()) == []

    def test_escaped_delimiter_is_not_a_reference(self) -> None:
        assert extract("%%prefix.x%%", make_reference_config()) == []

    def test_default_config_uses_vault_prefix(self) -> None:
        value = "%vault:secret/db!/password% %prefix.x%"
        assert extract(value) == ["secret/db!/password"]

    def test_custom_delimiter(self) -> None:
        config = ReferenceConfig(namespace_prefix="prefix.", delimiter="#")
        assert extract("#prefix.a# %prefix.b%", config) == ["a"]
