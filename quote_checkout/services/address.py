"""Best-guess state abbreviation from a free-text mailing address."""

import re

DEFAULT_REGION = "US"

# ", NJ 07102" / " nj 07102-1234" at the very end of the address
_STATE_ZIP_RE = re.compile(r"(?:,|\s)([A-Za-z]{2})\s*\d{5}(?:-\d{4})?$", re.IGNORECASE)
_NON_LETTER_RE = re.compile(r"[^A-Za-z]")


def extract_region(address: object = "") -> str:
    """Return a two-letter region code for *address*, or ``"US"``.

    Tries the trailing "state + ZIP" pattern first, then falls back to the
    first standalone two-letter token. Heuristic: a two-letter word earlier
    in the address (e.g. a short name) can win the fallback scan.
    """
    text = str(address if address is not None else "").strip()

    match = _STATE_ZIP_RE.search(text)
    if match:
        return match.group(1).upper()

    for token in _NON_LETTER_RE.split(text):
        if len(token) == 2:
            return token.upper()

    return DEFAULT_REGION
