"""Field Validators — format predicates for participant payloads.

Invariants:
    - Pure functions: no IO, no side effects, never raise on odd input
    - validate_dob checks FORMAT only (2023/99/99 passes) — no calendar validation
    - fullmatch everywhere: a trailing newline never sneaks past the anchors
"""

import re

# local part: dot-separated runs without specials, or a quoted string
# domain: one or more "label." followed by a final label of 2+ chars
_EMAIL_RE = re.compile(
    r'(([^<>()\[\]\\.,;:\s@"]+(\.[^<>()\[\]\\.,;:\s@"]+)*)|(".+"))'
    r'@(([^<>()\[\]\\.,;:\s@"]+\.)+[^<>()\[\]\\.,;:\s@"]{2,})',
    re.IGNORECASE,
)

_DOB_RE = re.compile(r"[0-9]{4}/[0-9]{2}/[0-9]{2}")


def validate_email(email: object) -> bool:
    """True iff email looks like local-part@domain with a 2+ char final label."""
    return _EMAIL_RE.fullmatch(str(email).lower()) is not None


def validate_dob(dob: object) -> bool:
    """True iff dob is exactly YYYY/MM/DD digits."""
    return _DOB_RE.fullmatch(str(dob)) is not None
