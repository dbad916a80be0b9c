from .date import CHECKOUT_FMT, DateLike, format_date, to_date

__all__ = ["CHECKOUT_FMT", "DateLike", "format_date", "to_date"]
