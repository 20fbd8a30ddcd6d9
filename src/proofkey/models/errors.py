"""Exception hierarchy for PKCE failures.

Each failure mode has its own exception type so callers can match on the
class rather than on message text. All of them derive from PKCEError.
"""

from __future__ import annotations

from proofkey.constants import UNRESERVED, VERIFIER_MAX_LEN, VERIFIER_MIN_LEN


class PKCEError(Exception):
    """Base exception for all PKCE related errors."""

    default_message = "PKCE operation failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class VerifierLengthError(PKCEError, ValueError):
    """Raised when a code verifier length is outside RFC 7636 Section 4.1 bounds."""

    default_message = (
        f"code verifier must be between {VERIFIER_MIN_LEN} and "
        f"{VERIFIER_MAX_LEN} characters long"
    )


class VerifierCharactersError(PKCEError, ValueError):
    """Raised when a code verifier contains a byte outside the unreserved set."""

    default_message = (
        "code verifier must only contain unreserved characters from the set: "
        f"{{'{UNRESERVED}'}}"
    )


class MethodNotSupportedError(PKCEError, ValueError):
    """Raised when a transform method other than 'plain' or 'S256' is requested."""

    default_message = (
        "clients must use either 'plain' or 'S256' as a transform method"
    )


class MethodDowngradeError(PKCEError, ValueError):
    """Raised when switching from 'S256' back to 'plain'.

    RFC 7636 Section 7.2: clients must not downgrade to "plain" after trying
    the "S256" method. An error on "S256" can only mean a faulty server or a
    MITM attacker attempting a downgrade attack.
    """

    default_message = (
        "clients must not downgrade to 'plain' after trying the 'S256' method"
    )
