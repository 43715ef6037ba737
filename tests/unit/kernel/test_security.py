"""Unit tests for kernel security – sensitivity predicates."""
import pytest

from mp_redact.kernel.security import (
    DEFAULT_SENSITIVE_FIELDS,
    any_of,
    default_predicate,
    names_containing,
    names_equal,
    names_matching,
    names_with_prefix,
    names_with_suffix,
)


class TestNamesEqual:
    def test_case_insensitive_by_default(self):
        predicate = names_equal("password", "secret")
        assert predicate("Password")
        assert predicate("SECRET")
        assert not predicate("passwords")

    def test_case_sensitive(self):
        predicate = names_equal("password", case_sensitive=True)
        assert predicate("password")
        assert not predicate("Password")


class TestPatterns:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Username", False),
            ("Password", True),
            ("AccessToken", True),
            ("RefreshToken", True),
            ("PublicKey", False),
            ("PrivateKey", True),
            ("SessionCookie", True),
        ],
    )
    def test_contains(self, name, expected):
        predicate = names_containing("password", "secret", "token", "private", "cookie")
        assert predicate(name) is expected

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("ServiceName", False),
            ("DatabaseKey", True),
            ("AuthToken", True),
            ("CacheTimeout", False),
            ("SecretSignature", True),
        ],
    )
    def test_suffix_prefix_combination(self, name, expected):
        predicate = any_of(
            names_with_suffix("key", "token"),
            names_with_prefix("secret"),
            names_containing("signature"),
        )
        assert predicate(name) is expected

    def test_glob(self):
        predicate = names_matching("*_key", "pass*")
        assert predicate("API_KEY")
        assert predicate("passwd")
        assert not predicate("keychain")


class TestDefaults:
    def test_default_predicate(self):
        predicate = default_predicate()
        assert predicate("Authorization")
        assert not predicate("name")

    def test_default_fields_lowercase(self):
        assert all(f == f.lower() for f in DEFAULT_SENSITIVE_FIELDS)
