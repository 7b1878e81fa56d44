"""Tests for credential verification."""

import pytest

from roster.credentials import Pbkdf2Verifier


class TestPbkdf2Verifier:
    def test_verify_roundtrip(self, verifier):
        token = verifier.hash("s3cret")
        assert verifier.verify("s3cret", token)
        assert not verifier.verify("S3cret", token)

    def test_token_does_not_contain_secret(self, verifier):
        token = verifier.hash("s3cret")
        assert "s3cret" not in token
        assert token.startswith("pbkdf2_sha256$1$")

    def test_tokens_are_salted(self, verifier):
        assert verifier.hash("same") != verifier.hash("same")

    def test_token_carries_its_iterations(self):
        token = Pbkdf2Verifier(iterations=3).hash("pw")
        assert Pbkdf2Verifier(iterations=5).verify("pw", token)

    @pytest.mark.parametrize(
        "token",
        ["", "garbage", "md5$1$00$00", "pbkdf2_sha256$x$00$00", "pbkdf2_sha256$0$00$00"],
    )
    def test_malformed_token_fails(self, verifier, token):
        assert not verifier.verify("pw", token)

    def test_rejects_non_positive_iterations(self):
        with pytest.raises(ValueError):
            Pbkdf2Verifier(iterations=0)
