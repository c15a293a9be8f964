import pytest
from structlog.testing import capture_logs

from imaginify.config import get_settings
from imaginify.design_system.layout import get_spacing
from imaginify.design_system.tokens import (
    TokenLookupPolicy,
    current_policy,
    lookup,
    lookup_policy,
)
from imaginify.exceptions import UnknownTokenError

TABLE = {"a": "1px"}


class TestLookup:
    def test_known_key(self) -> None:
        assert lookup("spacing", TABLE, "a", "0px") == "1px"

    def test_fallback_returns_default_and_logs(self) -> None:
        with capture_logs() as logs:
            result = lookup("spacing", TABLE, "missing", "0px")

        assert result == "0px"
        assert logs == [
            {
                "event": "token_fallback",
                "log_level": "warning",
                "kind": "spacing",
                "key": "missing",
                "fallback": "0px",
            }
        ]

    def test_strict_raises(self) -> None:
        with pytest.raises(UnknownTokenError) as exc:
            lookup("spacing", TABLE, "missing", "0px", policy="strict")

        assert exc.value.kind == "spacing"
        assert exc.value.key == "missing"
        assert exc.value.error_code == "UNKNOWN_TOKEN"

    def test_known_key_is_fine_under_strict(self) -> None:
        assert lookup("spacing", TABLE, "a", "0px", policy=TokenLookupPolicy.STRICT) == "1px"


class TestPolicySelection:
    def test_default_from_settings(self) -> None:
        assert current_policy() is TokenLookupPolicy.FALLBACK

    def test_settings_can_make_lookups_strict(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("IMG_TOKEN_LOOKUP_POLICY", "strict")
        get_settings.cache_clear()

        assert current_policy() is TokenLookupPolicy.STRICT
        with pytest.raises(UnknownTokenError):
            get_spacing("typo")

    def test_scoped_override(self) -> None:
        with lookup_policy("strict") as policy:
            assert policy is TokenLookupPolicy.STRICT
            with pytest.raises(UnknownTokenError):
                get_spacing("typo")

        assert current_policy() is TokenLookupPolicy.FALLBACK
        assert get_spacing("typo") == "0px"

    def test_explicit_argument_beats_scope(self) -> None:
        with lookup_policy("strict"):
            assert get_spacing("typo", policy="fallback") == "0px"

    def test_nested_scopes_restore(self) -> None:
        with lookup_policy("strict"):
            with lookup_policy("fallback"):
                assert current_policy() is TokenLookupPolicy.FALLBACK
            assert current_policy() is TokenLookupPolicy.STRICT
