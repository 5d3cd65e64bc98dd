"""Parse raw text input into a number, or None when it isn't one."""

from typing import Optional


def parse_value(raw: Optional[str]) -> Optional[float]:
    """Parse the whole input as a real number.

    Surrounding whitespace is ignored. Partial numbers ("12abc"), locale
    formatting ("1,5"), digit-group underscores ("1_000") and non-ASCII
    digits are rejected. Returns None instead of raising.
    """
    if raw is None:
        return None
    text = raw.strip()
    if not text or "_" in text or not text.isascii():
        return None
    try:
        return float(text)
    except ValueError:
        return None
