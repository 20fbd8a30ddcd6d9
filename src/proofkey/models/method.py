"""Code challenge transform methods (RFC 7636 Section 4.2)."""

from __future__ import annotations

from enum import Enum

from proofkey.models.errors import MethodNotSupportedError


class Method(str, Enum):
    """Transform used to derive a code challenge from a code verifier.

    PLAIN: code_challenge = code_verifier
        Kept for compatibility with deployments that cannot use S256.

    S256: code_challenge = BASE64URL-ENCODE(SHA256(ASCII(code_verifier)))
        Mandatory to implement on the server; clients capable of S256 must
        use it.
    """

    PLAIN = "plain"
    S256 = "S256"

    def __str__(self) -> str:
        return self.value


def parse_method(method: Method | str) -> Method:
    """Convert a method value into a Method, rejecting anything unsupported.

    Matching is exact and case sensitive, so "s256" and "" are rejected.

    Raises:
        MethodNotSupportedError: If the value is not 'plain' or 'S256'
    """
    try:
        return Method(method)
    except ValueError as e:
        raise MethodNotSupportedError() from e
