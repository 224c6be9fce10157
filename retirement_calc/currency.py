"""Display formatting for amounts. Formatting never changes the underlying value."""

from enum import Enum


class Currency(str, Enum):
    USD = "USD"
    EUR = "EUR"
    INR = "INR"


# currency -> (symbol, thousands separator, decimal separator, grouping style)
_STYLES = {
    Currency.USD: ("$", ",", ".", "western"),
    Currency.EUR: ("€", ".", ",", "western"),
    Currency.INR: ("₹", ",", ".", "indian"),
}


def parse_currency(value: str | Currency) -> Currency:
    """Case-insensitive lookup. Raises ValueError for unknown codes."""
    if isinstance(value, Currency):
        return value
    try:
        return Currency(value.upper())
    except ValueError:
        choices = ", ".join(c.value for c in Currency)
        raise ValueError(f"Unknown currency {value!r} (choose from {choices})") from None


def _group(digits: str, style: str, sep: str) -> str:
    if style == "indian" and len(digits) > 3:
        # last three digits, then groups of two (12,34,567)
        head, tail = digits[:-3], digits[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        return sep.join(groups + [tail])
    groups = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    return sep.join(groups)


def _format(value: float, currency: Currency, min_decimals: int, max_decimals: int) -> tuple[str, str]:
    """Return (sign, grouped number) for value."""
    _, sep, dec, style = _STYLES[currency]
    text = f"{abs(value):.{max_decimals}f}"
    int_part, _, frac = text.partition(".")
    if len(frac) > min_decimals:
        frac = frac.rstrip("0")
        frac = frac.ljust(min_decimals, "0")
    number = _group(int_part, style, sep)
    if frac:
        number = f"{number}{dec}{frac}"
    sign = "-" if value < 0 and text.strip("0.") else ""
    return sign, number


def format_currency(value: float, currency: Currency | str = Currency.INR) -> str:
    """Symbol plus two decimals: ₹12,34,567.89 / $1,234,567.89 / €1.234.567,89."""
    currency = parse_currency(currency)
    sign, number = _format(value, currency, 2, 2)
    return f"{sign}{_STYLES[currency][0]}{number}"


def format_number(value: float, currency: Currency | str = Currency.INR) -> str:
    """Locale-grouped number with up to two decimals, no symbol."""
    currency = parse_currency(currency)
    sign, number = _format(value, currency, 0, 2)
    return f"{sign}{number}"


def axis_unit(currency: Currency | str) -> tuple[float, str]:
    """Chart axis scale: crore for INR, million otherwise."""
    if parse_currency(currency) is Currency.INR:
        return 1e7, "Cr"
    return 1e6, "M"
