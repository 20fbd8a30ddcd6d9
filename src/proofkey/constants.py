"""RFC 7636 constants shared across the package.

Covers the code verifier alphabet and length bounds (Section 4.1) and the
parameter names used on the wire (Sections 4.3 and 4.5).
"""

from __future__ import annotations

import string

# unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
UNRESERVED = string.ascii_letters + string.digits + "-._~"
UNRESERVED_BYTES = frozenset(UNRESERVED.encode("ascii"))

VERIFIER_MIN_LEN = 43
VERIFIER_MAX_LEN = 128

# Authorization request (required)
PARAM_CODE_CHALLENGE = "code_challenge"
# Authorization request (optional). Servers treat a missing value as "plain".
PARAM_CODE_CHALLENGE_METHOD = "code_challenge_method"
# Token request
PARAM_CODE_VERIFIER = "code_verifier"
