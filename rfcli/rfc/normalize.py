# rfcli/rfc/normalize.py
"""
Strip pagination artifacts from plain-text RFCs.

Removes form feeds, page footers (any line containing "[Page N]"), and
running headers (lines starting with "RFC N"), then squeezes the blank
runs left behind down to a single blank line.
"""

from __future__ import annotations

import re

FORM_FEED = "\x0c"

# Content of the line is dropped, its newline kept; the collapse below cleans up.
PAGINATION_RE = re.compile(r"^.*\[Page \d+\].*$|^RFC \d+.*$", re.MULTILINE)
BLANK_RUN_RE = re.compile(r"\n{3,}")


def normalize(raw: str) -> str:
    """
    Return `raw` without page breaks, footers and running headers.

    Pure and idempotent: normalize(normalize(x)) == normalize(x).
    """
    text = raw.replace(FORM_FEED, "")
    text = PAGINATION_RE.sub("", text)
    return BLANK_RUN_RE.sub("\n\n", text)
