"""Parsing of the timestamps BES puts on content listings."""

from datetime import datetime
from email.utils import parsedate_to_datetime


def parse_bes_modtime(value: str | None) -> datetime | None:
    """
    Parse a ``LastModified`` stamp such as ``Tue, 05 Mar 2024 18:23:44 +0000``.

    Returns None for missing or malformed values.
    """
    if not value:
        return None
    try:
        return parsedate_to_datetime(value.strip())
    except (TypeError, ValueError):
        return None
