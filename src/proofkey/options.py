"""Construction options for proofkey.key.Key.

Options are applied in the order given. with_code_verifier always fixes
the verifier length, while with_code_verifier_length is ignored once a
verifier is present, so their relative order changes the result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from proofkey.models.method import Method

if TYPE_CHECKING:
    from proofkey.key import Key

Option = Callable[["Key"], None]


def with_challenge_method(method: Method | str) -> Option:
    """Choose the challenge transform method.

    Follows the same rules as Key.set_challenge_method.
    """

    def option(key: Key) -> None:
        key.set_challenge_method(method)

    return option


def with_code_verifier(code_verifier: str | bytes | bytearray) -> Option:
    """Supply the code verifier instead of generating one."""

    def option(key: Key) -> None:
        key._set_code_verifier(code_verifier)

    return option


def with_code_verifier_length(n: int) -> Option:
    """Set the length of the verifier to generate.

    Does nothing if a verifier has already been supplied.
    """

    def option(key: Key) -> None:
        key._set_code_verifier_length(n)

    return option
