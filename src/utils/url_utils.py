"""String helpers for PAGASA pubfiles URLs"""

import re
from typing import Optional

ENCODED_SPACE = "%20"
ENCODED_PARENS = ("%28", "%29", "(", ")")

YEAR_PATTERN = re.compile(r"[0-9]{4}")


def encode_spaces(url: str) -> str:
    """Replace literal spaces with %20 (directory labels are not encoded on the index page)"""
    return url.replace(" ", ENCODED_SPACE)


def extract_year(url: str) -> Optional[str]:
    """Return the first 4-digit run in the URL once %20 tokens are removed.

    The tokens are removed first so that "CY%201991" yields "1991" and not
    "2019" read across the escape.

    Longer digit runs are not skipped: the first four digits of the run are
    taken, so "12345" yields "1234".

    Returns:
        The year string, or None if the URL has no 4-digit run
    """
    match = YEAR_PATTERN.search(url.replace(ENCODED_SPACE, ""))
    return match.group(0) if match else None


def base_name(url: str) -> str:
    """Final path segment of a URL"""
    return url.rsplit("/", 1)[-1]


def sanitize_file_name(url: str) -> str:
    """Local file name for a PDF URL.

    Example:
        ".../Climate%20Data%20%281991-2020%29.pdf" -> "Climate_Data_1991-2020.pdf"
    """
    file_name = base_name(url).replace(ENCODED_SPACE, "_")
    for token in ENCODED_PARENS:
        file_name = file_name.replace(token, "")
    return file_name
