"""Code verifier validation (RFC 7636 Section 4.1).

Checks work on raw bytes. Every legal character is single-byte ASCII, so a
multi-byte UTF-8 sequence is rejected through its individual bytes.
"""

from __future__ import annotations

from proofkey.constants import UNRESERVED_BYTES, VERIFIER_MAX_LEN, VERIFIER_MIN_LEN
from proofkey.models.errors import VerifierCharactersError, VerifierLengthError


def validate_code_verifier(verifier: bytes) -> None:
    """Ensure a code verifier is specification compliant.

    Length is checked before characters so an empty verifier reports a
    length error.

    Raises:
        VerifierLengthError: If the verifier is shorter than 43 or longer than 128
        VerifierCharactersError: If the verifier contains a reserved byte
    """
    validate_verifier_len(len(verifier))
    validate_characters(verifier)


def validate_verifier_len(n: int) -> None:
    """Ensure a verifier length lies within [43, 128].

    Raises:
        VerifierLengthError: If n is out of bounds, negative values included
    """
    if n < VERIFIER_MIN_LEN or n > VERIFIER_MAX_LEN:
        raise VerifierLengthError()


def validate_characters(verifier: bytes) -> None:
    """Ensure every byte belongs to the unreserved character set.

    Raises:
        VerifierCharactersError: On the first byte outside the set
    """
    for byte in verifier:
        if not is_unreserved(byte):
            raise VerifierCharactersError()


def is_unreserved(byte: int) -> bool:
    """Check if a single byte is in A-Z a-z 0-9 - . _ ~"""
    return byte in UNRESERVED_BYTES
