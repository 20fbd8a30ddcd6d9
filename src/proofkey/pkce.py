"""Proof Key for Code Exchange (RFC 7636) free functions.

PKCE, pronounced "pixy", mitigates the authorization code interception
attack. A client creates a random code verifier, sends a code challenge
derived from it with the authorization request, and later proves possession
by sending the verifier with the token request. The server recomputes the
challenge and compares.

These functions validate their input and wrap the primitives in
proofkey.primitives.generation. Use proofkey.key.Key for a stateful
equivalent that remembers its method and verifier.
"""

from __future__ import annotations

from proofkey.models.errors import PKCEError
from proofkey.models.method import Method
from proofkey.primitives.generation import generate_challenge, generate_verifier
from proofkey.primitives.validation import validate_code_verifier, validate_verifier_len


def to_verifier_bytes(code_verifier: str | bytes | bytearray) -> bytes:
    """Return the raw bytes of a code verifier.

    Text is UTF-8 encoded so non-ASCII characters surface as reserved bytes
    during validation instead of raising an encoding error.
    """
    if isinstance(code_verifier, str):
        return code_verifier.encode("utf-8")
    return bytes(code_verifier)


def generate_code_verifier(n: int) -> str:
    """Generate an RFC 7636 compliant, cryptographically secure code verifier.

    Args:
        n: Verifier length, between 43 and 128

    Returns:
        A code verifier of exactly n unreserved characters

    Raises:
        VerifierLengthError: If n is out of bounds
    """
    validate_verifier_len(n)

    return generate_verifier(n).decode("ascii")


def generate_code_challenge(
    method: Method | str, code_verifier: str | bytes | bytearray
) -> str:
    """Derive the code challenge for a code verifier.

    The verifier is validated; the method is not. Anything other than
    exactly 'plain' is transformed with S256.

    Raises:
        VerifierLengthError: If the verifier length is out of bounds
        VerifierCharactersError: If the verifier contains a reserved byte
    """
    verifier = to_verifier_bytes(code_verifier)
    validate_code_verifier(verifier)

    return generate_challenge(method, verifier)


def verify_code_verifier(
    method: Method | str, code_verifier: str, code_challenge: str
) -> bool:
    """Check a received code verifier against a stored code challenge.

    RFC 7636 Section 4.6: the server transforms the received verifier with
    the method the client declared and compares it with the challenge it
    recorded for the authorization request.

    Never raises. An invalid verifier or an unknown method yields False.
    """
    if method == Method.PLAIN:
        # The challenge is not a secret, plain equality is sufficient.
        return code_verifier == code_challenge

    if method == Method.S256:
        try:
            derived = generate_code_challenge(method, code_verifier)
        except PKCEError:
            return False
        return derived == code_challenge

    return False
