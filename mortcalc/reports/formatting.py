# mortcalc/reports/formatting.py
"""
Currency and percentage formatting with an explicit, injected locale.

Nothing here reads the process locale: callers pick a CurrencyFormat (or a
locale key via get_currency_format) so output is reproducible in tests and CI.
"""

from __future__ import annotations

from dataclasses import dataclass

from mortcalc.core.errors import UnknownLocaleError
from mortcalc.core.finance.amortization import AmortizationEntry


@dataclass(frozen=True)
class CurrencyFormat:
    """
    How a locale writes money.

    Attributes:
        symbol: Currency symbol ("$", "€", "£", "¥", "₹").
        group_sep: Thousands separator.
        decimal_sep: Decimal separator.
        decimals: Digits after the decimal separator.
        symbol_first: Symbol before the number ("$1.00") or after ("1,00 €").
        symbol_space: Put a space between number and symbol.
    """

    symbol: str = "$"
    group_sep: str = ","
    decimal_sep: str = "."
    decimals: int = 2
    symbol_first: bool = True
    symbol_space: bool = False


US = CurrencyFormat()

CURRENCY_FORMATS: dict[str, CurrencyFormat] = {
    "en_US": US,
    "en_CA": US,
    "en_GB": CurrencyFormat(symbol="£"),
    "en_IN": CurrencyFormat(symbol="₹"),
    "de_DE": CurrencyFormat(symbol="€", group_sep=".", decimal_sep=",", symbol_first=False, symbol_space=True),
    "fr_FR": CurrencyFormat(symbol="€", group_sep=" ", decimal_sep=",", symbol_first=False, symbol_space=True),
    "ja_JP": CurrencyFormat(symbol="¥", decimals=0),
}


def get_currency_format(locale: str) -> CurrencyFormat:
    """
    Look up a registered CurrencyFormat.

    Accepts "en_US", "en-US" and "en_US.UTF-8" spellings.
    """
    key = locale.split(".", 1)[0].replace("-", "_")
    try:
        return CURRENCY_FORMATS[key]
    except KeyError:
        known = ", ".join(sorted(CURRENCY_FORMATS))
        raise UnknownLocaleError(f"No currency format for locale {locale!r} (known: {known})") from None


def format_currency(amount: float, fmt: CurrencyFormat = US) -> str:
    """
    Format a float as currency text.

    Example:
        123456.789 -> $123,456.79          (en_US)
        -2000      -> -$2,000.00           (en_US)
        1234.5     -> 1.234,50 €           (de_DE)
    """
    sign = "-" if round(amount, fmt.decimals) < 0 else ""
    digits = f"{abs(amount):,.{fmt.decimals}f}"
    # Swap separators through a placeholder so "," and "." can trade places.
    number = digits.replace(",", "\0").replace(".", fmt.decimal_sep).replace("\0", fmt.group_sep)
    space = " " if fmt.symbol_space else ""
    if fmt.symbol_first:
        return f"{sign}{fmt.symbol}{space}{number}"
    return f"{sign}{number}{space}{fmt.symbol}"


def format_percent(rate_percent: float) -> str:
    """
    Format a rate already expressed in percent.

    Example:
        6.5 -> 6.50%
    """
    return f"{rate_percent:.2f}%"


def format_entry(entry: AmortizationEntry, fmt: CurrencyFormat = US) -> str:
    """Render one schedule row as a console line."""
    return (
        f"Month {entry.period}: Payment: {format_currency(entry.payment, fmt)}, "
        f"Principal: {format_currency(entry.principal, fmt)}, "
        f"Interest: {format_currency(entry.interest, fmt)}, "
        f"Remaining: {format_currency(entry.balance, fmt)}"
    )
