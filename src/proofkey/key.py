"""Stateful proof key for a single authorization code flow.

A Key remembers its transform method and code verifier so the client can
send the challenge with the authorization request and the verifier with
the token request. Keys are single-owner objects and are not locked.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from proofkey.constants import VERIFIER_MIN_LEN
from proofkey.models.errors import MethodDowngradeError
from proofkey.models.method import Method, parse_method
from proofkey.models.params import AuthorizationParameters, TokenParameters
from proofkey.models.security import PKCEParameters
from proofkey.pkce import to_verifier_bytes, verify_code_verifier
from proofkey.primitives.generation import generate_challenge, generate_verifier
from proofkey.primitives.validation import validate_code_verifier, validate_verifier_len

if TYPE_CHECKING:
    from proofkey.options import Option

logger = logging.getLogger(__name__)


def new(*options: Option) -> Key:
    """Create a Key, applying options in order.

    Defaults to S256 and a 43 character verifier. The first failing option
    propagates its exception; options applied before it are not rolled
    back, so the partially configured Key must be discarded.

    Raises:
        PKCEError: Subclass raised by the first failing option
    """
    return Key(*options)


class Key:
    """Proof key for code exchange.

    The challenge method starts unset and reads as S256 until one is chosen.
    Choosing 'plain' from the unset state is allowed; once S256 has been
    chosen, or a challenge has been handed out while unset, it can never go
    back to 'plain'.

    The code verifier is either supplied through an option or generated on
    first access, and never changes afterwards.
    """

    def __init__(self, *options: Option):
        self._challenge_method: Method | None = None
        self._code_verifier_len = VERIFIER_MIN_LEN
        self._code_verifier: bytes | None = None

        for option in options:
            option(self)

    def __repr__(self) -> str:
        return (
            f"Key(challenge_method={self.challenge_method!s}, "
            f"code_verifier_len={self._code_verifier_len})"
        )

    @property
    def challenge_method(self) -> Method:
        """The transform used for code challenges."""
        return self._challenge_method or Method.S256

    @property
    def code_verifier_len(self) -> int:
        """Length of the supplied verifier, or of the one to be generated."""
        return self._code_verifier_len

    def set_challenge_method(self, method: Method | str) -> None:
        """Change the transform method, only ever upgrading.

        Raises:
            MethodNotSupportedError: If method is not 'plain' or 'S256'
            MethodDowngradeError: If the key already uses S256 and method is 'plain'
        """
        method = parse_method(method)

        if self._challenge_method == Method.S256 and method == Method.PLAIN:
            logger.warning("Refused challenge method downgrade from S256 to plain")
            raise MethodDowngradeError()

        if method != self._challenge_method:
            logger.debug(f"Challenge method set to {method}")
        self._challenge_method = method

    def code_verifier(self) -> str:
        """Return the code verifier, generating it on first use."""
        return self._get_code_verifier().decode("ascii")

    def code_challenge(self) -> str:
        """Return the code challenge for the current method and verifier.

        Computed on every call so it follows method changes. Handing out a
        challenge commits an unset method to S256, so it can no longer be
        downgraded to plain afterwards.
        """
        if self._challenge_method is None:
            self._challenge_method = Method.S256

        return generate_challenge(self.challenge_method, self._get_code_verifier())

    def verify_code_verifier(self, code_verifier: str) -> bool:
        """Check a code verifier against this key's own challenge.

        Only meaningful on the side that holds the original verifier.
        """
        return verify_code_verifier(
            self.challenge_method, code_verifier, self.code_challenge()
        )

    def parameters(self) -> PKCEParameters:
        """Snapshot the verifier, challenge and method."""
        return PKCEParameters(
            code_verifier=self.code_verifier(),
            code_challenge=self.code_challenge(),
            code_challenge_method=self.challenge_method,
        )

    def authorization_parameters(self) -> AuthorizationParameters:
        """Parameters for the authorization request."""
        return AuthorizationParameters(
            code_challenge=self.code_challenge(),
            code_challenge_method=self.challenge_method,
        )

    def token_parameters(self) -> TokenParameters:
        """Parameters for the token request."""
        return TokenParameters(code_verifier=self.code_verifier())

    def _get_code_verifier(self) -> bytes:
        if not self._code_verifier:
            self._code_verifier = generate_verifier(self._code_verifier_len)
            logger.debug(
                f"Generated code verifier of length {self._code_verifier_len}"
            )

        return self._code_verifier

    def _set_code_verifier(self, code_verifier: str | bytes | bytearray) -> None:
        verifier = to_verifier_bytes(code_verifier)
        validate_code_verifier(verifier)

        self._code_verifier = verifier
        self._code_verifier_len = len(verifier)

    def _set_code_verifier_length(self, n: int) -> None:
        # A supplied verifier wins over any requested length.
        if self._code_verifier:
            return

        validate_verifier_len(n)

        self._code_verifier_len = n
