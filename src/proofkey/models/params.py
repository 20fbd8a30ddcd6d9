"""Wire parameter models for carrying PKCE values in OAuth requests.

The client sends code_challenge and code_challenge_method with the
authorization request (RFC 7636 Section 4.3) and code_verifier with the
token request (Section 4.5). The verifier side parses the former from the
authorization request and checks the latter against it (Section 4.6).
"""

from __future__ import annotations

from collections.abc import Mapping

import httpx
from pydantic import BaseModel, Field, field_validator

from proofkey.constants import (
    PARAM_CODE_CHALLENGE,
    PARAM_CODE_CHALLENGE_METHOD,
    PARAM_CODE_VERIFIER,
    VERIFIER_MAX_LEN,
    VERIFIER_MIN_LEN,
)
from proofkey.models.method import Method, parse_method
from proofkey.pkce import to_verifier_bytes, verify_code_verifier
from proofkey.primitives.validation import validate_code_verifier


class AuthorizationParameters(BaseModel):
    """PKCE parameters added to an authorization request by the client."""

    code_challenge: str = Field(min_length=VERIFIER_MIN_LEN, max_length=VERIFIER_MAX_LEN)
    code_challenge_method: Method = Method.S256

    @field_validator("code_challenge_method", mode="before")
    @classmethod
    def validate_method(cls, v: Method | str) -> Method:
        """Reject methods other than plain and S256."""
        return parse_method(v)

    def to_query_params(self) -> dict[str, str]:
        """Convert to authorization request query parameters."""
        return {
            PARAM_CODE_CHALLENGE: self.code_challenge,
            PARAM_CODE_CHALLENGE_METHOD: str(self.code_challenge_method),
        }

    def apply_to_url(self, url: str | httpx.URL) -> str:
        """Merge the PKCE parameters into an authorization endpoint URL.

        Query parameters already present on the URL are kept; existing PKCE
        parameters are replaced.

        Args:
            url: Authorization endpoint, with or without a query string

        Returns:
            The authorization URL including the PKCE parameters
        """
        return str(httpx.URL(url).copy_merge_params(self.to_query_params()))


class TokenParameters(BaseModel):
    """PKCE parameter added to a token request by the client."""

    code_verifier: str

    @field_validator("code_verifier")
    @classmethod
    def validate_code_verifier(cls, v: str) -> str:
        """Validate the verifier meets RFC 7636 Section 4.1."""
        validate_code_verifier(to_verifier_bytes(v))
        return v

    def to_form_data(self) -> dict[str, str]:
        """Convert to form data for the token request body.

        Returns:
            Dictionary suitable for an httpx data parameter
        """
        return {PARAM_CODE_VERIFIER: self.code_verifier}


class ChallengeRequest(BaseModel):
    """PKCE parameters as received by the verifier with an authorization request.

    A missing code_challenge_method means "plain" on the wire (RFC 7636
    Section 4.3), unlike Key which defaults to S256.
    """

    code_challenge: str = Field(min_length=VERIFIER_MIN_LEN, max_length=VERIFIER_MAX_LEN)
    code_challenge_method: Method = Method.PLAIN

    @field_validator("code_challenge_method", mode="before")
    @classmethod
    def validate_method(cls, v: Method | str) -> Method:
        """Reject methods other than plain and S256."""
        return parse_method(v)

    @classmethod
    def from_query_params(cls, params: Mapping[str, str]) -> ChallengeRequest:
        """Build from received authorization request parameters.

        Raises:
            pydantic.ValidationError: If the challenge is missing or malformed,
                or the method is not supported
        """
        data = {
            key: params[key]
            for key in (PARAM_CODE_CHALLENGE, PARAM_CODE_CHALLENGE_METHOD)
            if key in params
        }
        return cls.model_validate(data)

    def verify(self, code_verifier: str) -> bool:
        """Check a code verifier from a token request against this challenge."""
        return verify_code_verifier(
            self.code_challenge_method, code_verifier, self.code_challenge
        )
