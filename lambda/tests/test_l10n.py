"""
Unit tests for the localization resolver.
"""

import random
from collections import Counter

import pytest

from fact_skill import data
from fact_skill.l10n import (
    MissingResourceError,
    ResourceConfigurationError,
    ResourceTemplateError,
    get_translator,
    resolve_bundle,
    validate_bundles,
)

SAMPLE_BUNDLES = {
    "en": {
        "GREETING": "Hello {}, you have {} messages",
        "NAME": "Base",
        "COLORS": ["red", "green", "blue"],
    },
    "en-GB": {"NAME": "British"},
    "de": {"NAME": "Deutsch"},
}


class TestResolveBundle:
    """Tests for locale resolution."""

    def test_exact_locale_overrides_default(self):
        """Regional keys win over the base bundle."""
        bundle = resolve_bundle("en-US", data.LANGUAGE_STRINGS)
        assert bundle["SKILL_NAME"] == " Thrissur Facts"

    def test_regional_locale_inherits_missing_keys(self):
        """Keys not in the regional bundle come from the base bundle."""
        bundle = resolve_bundle("en-GB", data.LANGUAGE_STRINGS)
        assert bundle["STOP_MESSAGE"] == "Goodbye!"
        assert len(bundle["FACTS"]) == 16

    def test_unknown_regional_locale_uses_language_bundle(self):
        """A region without its own bundle falls back to its language."""
        bundle = resolve_bundle("de-AT", SAMPLE_BUNDLES)
        assert bundle["NAME"] == "Deutsch"
        assert bundle["GREETING"] == SAMPLE_BUNDLES["en"]["GREETING"]

    @pytest.mark.parametrize("locale", ["fr-FR", "", None])
    def test_unknown_locale_uses_default(self, locale):
        """Locales without any bundle resolve to the default bundle."""
        bundle = resolve_bundle(locale, SAMPLE_BUNDLES)
        assert dict(bundle) == {**SAMPLE_BUNDLES["en"], "COLORS": ("red", "green", "blue")}

    def test_resolution_is_idempotent(self):
        """Resolving the same locale twice yields equal bundles."""
        first = resolve_bundle("en-IN", data.LANGUAGE_STRINGS)
        second = resolve_bundle("en-IN", data.LANGUAGE_STRINGS)
        assert first == second

    def test_resolved_bundle_is_read_only(self):
        """The resolved bundle cannot be mutated."""
        bundle = resolve_bundle("en", SAMPLE_BUNDLES)
        with pytest.raises(TypeError):
            bundle["NAME"] = "Changed"

    def test_list_values_cannot_change_shared_table(self):
        """List resources come back frozen, so the table stays as loaded."""
        bundle = resolve_bundle("en-US", data.LANGUAGE_STRINGS)

        with pytest.raises(AttributeError):
            bundle["FACTS"].append("Injected fact")

        sample = resolve_bundle("en", SAMPLE_BUNDLES)
        with pytest.raises(AttributeError):
            sample["COLORS"].append("purple")

        assert len(data.EN_DATA["FACTS"]) == 16
        assert SAMPLE_BUNDLES["en"]["COLORS"] == ["red", "green", "blue"]

    def test_resolution_does_not_mutate_table(self):
        """Merging bundles leaves the source table untouched."""
        resolve_bundle("en-GB", SAMPLE_BUNDLES)
        assert SAMPLE_BUNDLES["en"]["NAME"] == "Base"

    def test_missing_default_bundle_raises(self):
        """Without a default bundle resolution cannot succeed."""
        with pytest.raises(ResourceConfigurationError):
            resolve_bundle("en-GB", {"en-GB": {"NAME": "British"}})


class TestTranslator:
    """Tests for the per-request translate function."""

    def test_plain_string(self):
        """Strings without arguments are returned unchanged."""
        t = get_translator("en", data.LANGUAGE_STRINGS)
        assert t("STOP_MESSAGE") == "Goodbye!"

    def test_template_arguments_are_positional(self):
        """Arguments fill placeholders in order."""
        t = get_translator("en", SAMPLE_BUNDLES)
        assert t("GREETING", "Max", 3) == "Hello Max, you have 3 messages"

    def test_template_without_arguments_is_unchanged(self):
        """Placeholders are left alone when no arguments are given."""
        t = get_translator("en", SAMPLE_BUNDLES)
        assert t("GREETING") == "Hello {}, you have {} messages"

    def test_list_value_returns_single_element(self):
        """List resources resolve to one of their elements."""
        t = get_translator("en-US", data.LANGUAGE_STRINGS)
        for _ in range(50):
            assert t("FACTS") in data.EN_DATA["FACTS"]

    def test_list_selection_is_uniform(self):
        """Every element of a list is picked with roughly equal frequency."""
        random.seed(20190301)
        t = get_translator("en", SAMPLE_BUNDLES)

        counts = Counter(t("COLORS") for _ in range(9000))

        assert set(counts) == {"red", "green", "blue"}
        for count in counts.values():
            assert abs(count - 3000) < 300

    def test_mismatched_template_arguments_raise(self):
        """Templates that do not fit their arguments raise a resource error."""
        bundles = {"en": {"NAMED": "Hi {name}", "TWO": "{} and {}"}}
        t = get_translator("en-IN", bundles)

        with pytest.raises(ResourceTemplateError) as exc_info:
            t("NAMED", "Max")
        assert exc_info.value.key == "NAMED"
        assert exc_info.value.locale == "en-IN"

        with pytest.raises(ResourceTemplateError):
            t("TWO", "one")

    def test_missing_key_raises(self):
        """Unknown keys fail loudly instead of returning the key."""
        t = get_translator("en-GB", SAMPLE_BUNDLES)
        with pytest.raises(MissingResourceError) as exc_info:
            t("NOT_A_KEY")

        assert exc_info.value.key == "NOT_A_KEY"
        assert exc_info.value.locale == "en-GB"
        assert isinstance(exc_info.value, LookupError)

    def test_translators_are_independent(self):
        """Two requests with different locales do not share state."""
        us = get_translator("en-US", data.LANGUAGE_STRINGS)
        gb = get_translator("en-GB", data.LANGUAGE_STRINGS)

        assert us("SKILL_NAME") == " Thrissur Facts"
        assert gb("SKILL_NAME") == "Thrissur Facts"
        assert us("SKILL_NAME") == " Thrissur Facts"


class TestValidateBundles:
    """Tests for startup validation of the string table."""

    def test_shipped_table_is_valid(self):
        """The skill's own table passes validation."""
        validate_bundles(data.LANGUAGE_STRINGS, data.REQUIRED_KEYS, data.DEFAULT_LOCALE)

    def test_missing_default_bundle(self):
        """A table without the default locale is rejected."""
        with pytest.raises(ResourceConfigurationError):
            validate_bundles({"en-US": {"NAME": "x"}}, ["NAME"])

    def test_missing_required_key(self):
        """Every locale must resolve every required key."""
        with pytest.raises(ResourceConfigurationError, match="MISSING"):
            validate_bundles(SAMPLE_BUNDLES, ["NAME", "MISSING"])

    def test_empty_list_rejected(self):
        """List resources need at least one element."""
        bundles = {"en": {"FACTS": []}}
        with pytest.raises(ResourceConfigurationError, match="FACTS"):
            validate_bundles(bundles, ["FACTS"])

    def test_non_string_value_rejected(self):
        """Only strings and lists of strings are allowed."""
        bundles = {"en": {"NAME": "ok"}, "en-GB": {"NAME": 42}}
        with pytest.raises(ResourceConfigurationError, match="en-GB"):
            validate_bundles(bundles, ["NAME"])


class TestDataModule:
    """Tests for the language string table."""

    def test_all_required_keys_in_base_bundle(self):
        """The base bundle defines every recognized key."""
        for key in data.REQUIRED_KEYS:
            assert data.EN_DATA[key]

    def test_facts_are_distinct(self):
        """All 16 facts are catalogued once."""
        facts = data.EN_DATA["FACTS"]
        assert len(facts) == 16
        assert len(set(facts)) == 16

    def test_supported_locales(self):
        """The base and regional English locales are defined."""
        assert set(data.LANGUAGE_STRINGS) == {"en", "en-AU", "en-CA", "en-GB", "en-IN", "en-US"}
