"""Tests for the PKCE wire parameter models.

Covers the client side (authorization and token request parameters) and
the verifier side (parsing a received challenge and checking a verifier).
"""

from urllib.parse import parse_qs, urlparse

import pytest
from pydantic import ValidationError

from proofkey.key import Key
from proofkey.models.method import Method
from proofkey.models.params import (
    AuthorizationParameters,
    ChallengeRequest,
    TokenParameters,
)
from proofkey.options import with_challenge_method

VERIFIER_43 = "6et_m_LBa_8A-lHGANCGR0a6KATHyhr~5RU_CskUaaj"
CHALLENGE_43 = "1u1qURRaY4QPquG83Yu2fnyEYp4d0TLhXyj6AnaEcGQ"


class TestAuthorizationParameters:
    def setup_method(self):
        self.params = AuthorizationParameters(code_challenge=CHALLENGE_43)

    def test_defaults_to_s256(self) -> None:
        assert self.params.code_challenge_method is Method.S256

    def test_to_query_params(self) -> None:
        assert self.params.to_query_params() == {
            "code_challenge": CHALLENGE_43,
            "code_challenge_method": "S256",
        }

    def test_apply_to_url_preserves_existing_params(self) -> None:
        # Act
        url = self.params.apply_to_url(
            "https://auth.example.com/authorize?response_type=code&client_id=abc"
        )

        # Assert
        parsed = urlparse(url)
        query = parse_qs(parsed.query)
        assert parsed.netloc == "auth.example.com"
        assert parsed.path == "/authorize"
        assert query["response_type"] == ["code"]
        assert query["client_id"] == ["abc"]
        assert query["code_challenge"] == [CHALLENGE_43]
        assert query["code_challenge_method"] == ["S256"]

    def test_apply_to_url_replaces_existing_pkce_params(self) -> None:
        # Act
        url = self.params.apply_to_url(
            "https://auth.example.com/authorize?code_challenge_method=plain"
        )

        # Assert
        query = parse_qs(urlparse(url).query)
        assert query["code_challenge_method"] == ["S256"]

    def test_rejects_unsupported_method(self) -> None:
        with pytest.raises(ValidationError):
            AuthorizationParameters(
                code_challenge=CHALLENGE_43, code_challenge_method="S512"
            )

    def test_rejects_short_challenge(self) -> None:
        with pytest.raises(ValidationError):
            AuthorizationParameters(code_challenge="abc")


class TestTokenParameters:
    def test_to_form_data(self) -> None:
        params = TokenParameters(code_verifier=VERIFIER_43)

        assert params.to_form_data() == {"code_verifier": VERIFIER_43}

    @pytest.mark.parametrize(
        "verifier", ["", "short", "a" * 129, "a" * 43 + "!", "é" * 43]
    )
    def test_rejects_invalid_verifier(self, verifier: str) -> None:
        with pytest.raises(ValidationError):
            TokenParameters(code_verifier=verifier)


class TestChallengeRequest:
    def test_missing_method_defaults_to_plain(self) -> None:
        # Act
        request = ChallengeRequest.from_query_params({"code_challenge": VERIFIER_43})

        # Assert
        assert request.code_challenge_method is Method.PLAIN
        assert request.verify(VERIFIER_43) is True

    def test_parses_s256_and_ignores_other_params(self) -> None:
        # Act
        request = ChallengeRequest.from_query_params(
            {
                "response_type": "code",
                "code_challenge": CHALLENGE_43,
                "code_challenge_method": "S256",
            }
        )

        # Assert
        assert request.code_challenge_method is Method.S256
        assert request.verify(VERIFIER_43) is True
        assert request.verify("a" * 43) is False

    def test_empty_method_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ChallengeRequest.from_query_params(
                {"code_challenge": CHALLENGE_43, "code_challenge_method": ""}
            )

    def test_missing_challenge_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ChallengeRequest.from_query_params({"code_challenge_method": "S256"})

    @pytest.mark.parametrize("method", [Method.PLAIN, Method.S256])
    def test_round_trip_from_key(self, method: Method) -> None:
        # Arrange - client side
        key = Key(with_challenge_method(method))
        url = key.authorization_parameters().apply_to_url(
            "https://auth.example.com/authorize"
        )

        # Act - verifier side
        received = {k: v[0] for k, v in parse_qs(urlparse(url).query).items()}
        request = ChallengeRequest.from_query_params(received)

        # Assert
        assert request.verify(key.token_parameters().code_verifier) is True
        assert request.verify(Key().code_verifier()) is False
