"""Etymology section extraction from Wiktionary wikitext.

A structural slice, not a wikitext parse: the section runs from the line
after the ব্যুৎপত্তি ("etymology") heading up to the next section heading,
the next template block, or the end of the document.
"""

from __future__ import annotations

import re

ETYMOLOGY_HEADING = "ব্যুৎপত্তি"

# Rest of the heading line, then everything up to "\n==", "\n{{" or end of text
ETYMOLOGY_SECTION = re.compile(
    re.escape(ETYMOLOGY_HEADING) + r"[^\n]*\n(.*?)(?=\n==|\n\{\{|\Z)",
    re.DOTALL,
)


def extract_etymology(document: str) -> str | None:
    """Extract the etymology section of a wikitext document.

    Args:
        document: Raw wikitext

    Returns:
        Section text (possibly empty), or None if no etymology heading
        followed by a line break is present
    """
    match = ETYMOLOGY_SECTION.search(document)
    if match is None:
        return None
    return match.group(1)
