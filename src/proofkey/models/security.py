"""Immutable PKCE parameter snapshot.

Captures the verifier, challenge and method of a Key at a point in time so
they can be stored alongside a pending authorization request.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from proofkey.models.method import Method, parse_method
from proofkey.pkce import generate_code_challenge


@dataclass(frozen=True)
class PKCEParameters:
    """PKCE (Proof Key for Code Exchange) parameters for a single flow.

    The challenge is always consistent with the verifier under the method;
    construction fails otherwise.
    """

    code_verifier: str = field()
    code_challenge: str = field()
    code_challenge_method: Method = field(default=Method.S256)

    def __post_init__(self) -> None:
        """Validate PKCE parameters meet RFC 7636 requirements."""
        method = parse_method(self.code_challenge_method)
        object.__setattr__(self, "code_challenge_method", method)

        expected = generate_code_challenge(method, self.code_verifier)
        if expected != self.code_challenge:
            raise ValueError(
                f"code_challenge does not match code_verifier under {method}"
            )
