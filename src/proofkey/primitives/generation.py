"""Unvalidated code verifier and code challenge primitives.

Neither function validates its input. Callers are expected to go through
proofkey.pkce or proofkey.key, which validate first.
"""

from __future__ import annotations

import base64
import hashlib
import secrets

from proofkey.constants import UNRESERVED
from proofkey.models.method import Method


def generate_verifier(n: int) -> bytes:
    """Generate n cryptographically random bytes from the unreserved set.

    secrets.choice draws uniformly from the OS CSPRNG, so every symbol of
    the 66-character alphabet is equally likely.

    Args:
        n: Number of bytes to generate, already validated by the caller

    Returns:
        The code verifier as ASCII bytes
    """
    return "".join(secrets.choice(UNRESERVED) for _ in range(n)).encode("ascii")


def generate_challenge(method: Method | str, verifier: bytes) -> str:
    """Apply the transform for method to a verifier.

    Only an exact 'plain' takes the identity branch. Every other value,
    supported or not, is hashed as S256.

    Args:
        method: The transform method
        verifier: Raw code verifier bytes

    Returns:
        The code challenge
    """
    if method == Method.PLAIN:
        return verifier.decode("ascii")

    digest = hashlib.sha256(verifier).digest()

    return base64.urlsafe_b64encode(digest).decode("ascii").rstrip("=")
