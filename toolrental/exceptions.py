"""Exceptions raised by the rental pricing engine."""


class ToolRentalError(Exception):
    """Base class for all tool rental errors."""


class RentalInputError(ToolRentalError, ValueError):
    """Raised when checkout input fails validation."""


class InvalidToolCode(RentalInputError):
    """Tool code is not in the tool catalog, or its type has no charge policy."""

    def __init__(self, code: str):
        super().__init__(f"The tool code {code!r} does not match any tool in the catalog")
        self.code = code


class InvalidRentalDayCount(RentalInputError):
    """Rental day count is not a positive integer."""


class InvalidDiscountPercent(RentalInputError):
    """Discount percent is not a number in [0, 100)."""


class InvalidDateFormat(RentalInputError):
    """Checkout date could not be parsed."""


class InvalidDateError(ToolRentalError, ValueError):
    """A holiday rule resolves to a calendar date that does not exist."""


class CatalogError(ToolRentalError, ValueError):
    """A catalog source is malformed."""
