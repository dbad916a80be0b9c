from typing import Union
from datetime import datetime, date

from pandas import Timestamp

CHECKOUT_FMT = "%m/%d/%y"
CHECKOUT_LONG_FMT = "%m/%d/%Y"
ISO_FMT = "%Y-%m-%d"

DateLike = Union[str, date, datetime, Timestamp]


def to_date(date_like: DateLike) -> date:
    """
    Convert a string, datetime or pandas Timestamp to a date.
    Accepts 'MM/DD/YY', 'MM/DD/YYYY' and 'YYYY-MM-DD' string formats.
    Single-digit months and days ('7/2/15') are accepted too.
    """
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        text = date_like.strip()
        for fmt in (CHECKOUT_FMT, CHECKOUT_LONG_FMT, ISO_FMT):
            try:
                return datetime.strptime(text, fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Unsupported date string format: {date_like!r}")
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def format_date(dt: DateLike, fmt: str = CHECKOUT_FMT) -> str:
    """
    Format a date-like as 'MM/DD/YY' (or ``fmt``).
    """
    return to_date(dt).strftime(fmt)
