"""Tests for the Bundle data model."""

from __future__ import annotations

import pytest

from turnslate import Bundle, FetchError, MissingMainLocaleError


class TestFromPayload:
    """Deserialization of the service response."""

    def test_valid_payload(self) -> None:
        bundle = Bundle.from_payload({"main": "en", "langs": {"en": "a = A", "fr": "a = B"}})
        assert bundle.main == "en"
        assert dict(bundle.langs) == {"en": "a = A", "fr": "a = B"}

    def test_locale_order_preserved(self) -> None:
        langs = {"zh": "", "en": "", "lv": ""}
        assert list(Bundle.from_payload({"main": "en", "langs": langs}).langs) == ["zh", "en", "lv"]

    @pytest.mark.parametrize(
        "payload",
        [
            [],
            "bundle",
            None,
            {"langs": {"en": ""}},
            {"main": 1, "langs": {"en": ""}},
            {"main": "en"},
            {"main": "en", "langs": ["en"]},
            {"main": "en", "langs": {"en": None}},
        ],
    )
    def test_malformed_payload(self, payload: object) -> None:
        with pytest.raises(FetchError):
            Bundle.from_payload(payload)

    def test_missing_main_is_not_a_payload_error(self) -> None:
        """Shape is valid; the missing locale surfaces on main_source()."""
        bundle = Bundle.from_payload({"main": "de", "langs": {"en": ""}})
        assert bundle.main == "de"


class TestBundle:
    """Main locale access and immutability."""

    def test_main_source(self) -> None:
        assert Bundle(main="en", langs={"en": "a = A"}).main_source() == "a = A"

    def test_main_source_missing(self) -> None:
        bundle = Bundle(main="de", langs={"en": "", "fr": ""})
        with pytest.raises(MissingMainLocaleError) as exc_info:
            bundle.main_source()
        assert exc_info.value.main == "de"
        assert exc_info.value.available == ("en", "fr")
        assert "de" in str(exc_info.value)

    def test_langs_read_only(self) -> None:
        bundle = Bundle(main="en", langs={"en": ""})
        with pytest.raises(TypeError):
            bundle.langs["fr"] = ""  # type: ignore[index]

    def test_input_mapping_copied(self) -> None:
        langs = {"en": "a = A"}
        bundle = Bundle(main="en", langs=langs)
        langs["fr"] = "a = B"
        assert "fr" not in bundle.langs

    def test_locale_count(self) -> None:
        assert Bundle(main="en", langs={"en": "", "fr": ""}).locale_count == 2
