import logging
import re

from ..errors import FormatError

logger = logging.getLogger(__name__)

MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

MONTH_YEAR_RE = re.compile(r"^(\d{2})/(\d{4})$")
RANGE_SEPARATOR_RE = re.compile(r"[–-]")


def _format_part(part: str, strict: bool) -> str:
    match = MONTH_YEAR_RE.match(part)
    if not match:
        return part
    month, year = int(match.group(1)), match.group(2)
    if not 1 <= month <= 12:
        if strict:
            raise FormatError(f"Month out of range in date '{part}'")
        logger.warning(f"Leaving date '{part}' unformatted: month out of range")
        return part
    return f"{MONTHS[month - 1]} {year}"


def format_date(period: str, strict: bool = False) -> str:
    """
    Normalise MM/YYYY tokens to abbreviated month-year.

    "06/2022 - Current" -> "Jun 2022 – Current"; strings already in
    "Mon YYYY – Mon YYYY" form come back unchanged.
    """
    if RANGE_SEPARATOR_RE.search(period):
        start, end = RANGE_SEPARATOR_RE.split(period, maxsplit=1)
        return " – ".join(_format_part(p.strip(), strict) for p in (start, end))
    return _format_part(period, strict)
