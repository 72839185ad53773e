"""Template placement primitives shared by the numeric and monetary masks."""

from __future__ import annotations

import re

PLACEHOLDER = "9"

_NON_DIGITS = re.compile(r"[^0-9]")
_NUMERIC_TEMPLATE = re.compile(r"[9./,\-]+")
_CURRENCY_MARKER = re.compile(r"[R$]")
_CURRENCY_SYMBOLS = re.compile(r"R\$|\$")
_INTEGER_TEMPLATE_STRIP = re.compile(r"[^9.]")
_DECIMAL_GROUPING = re.compile(r"9[9.]*,9+")


def only_digits(value: str) -> str:
    return _NON_DIGITS.sub("", value or "")


def is_numeric_template(formato: str) -> bool:
    """True when the template holds only placeholders and ``. / , -``."""
    return bool(_NUMERIC_TEMPLATE.fullmatch(formato))


def is_monetary_template(formato: str) -> bool:
    return bool(_CURRENCY_MARKER.search(formato))


def apply_template(template: str, digits: str) -> str:
    """Place ``digits`` into ``template`` left to right.

    Every ``9`` consumes one digit; other characters are copied. The walk
    stops when either side is exhausted, so short inputs are truncated
    (no padding, no trailing literals) and extra digits are dropped.

    >>> apply_template("9.999,99", "123456")
    '1.234,56'
    >>> apply_template("99/99/9999", "1203")
    '12/03'
    """
    result = []
    position = 0
    for char in template:
        if position >= len(digits):
            break
        if char == PLACEHOLDER:
            result.append(digits[position])
            position += 1
        else:
            result.append(char)
    return "".join(result)


def apply_monetary_template(template: str, digits: str) -> str:
    """Format ``digits`` as an amount in cents using a currency template.

    The last two digits become the decimal part (the input is left-padded
    with zeros to at least three digits). The integer part is placed on
    the template's placeholders and thousands dots, and the result replaces
    the first ``9.999,99``-like grouping of the template body. The currency
    prefix depends only on which marker the template contains: ``R$`` adds
    ``"R$ "``, a bare ``$`` adds ``"$"``.
    """
    padded = digits.rjust(3, "0")
    integer_part, decimal_part = padded[:-2], padded[-2:]

    integer_template = _INTEGER_TEMPLATE_STRIP.sub("", template)
    masked_integer = apply_template(integer_template, integer_part)

    body = _CURRENCY_SYMBOLS.sub("", template).strip()
    result = _DECIMAL_GROUPING.sub(
        lambda _match: f"{masked_integer},{decimal_part}",
        body,
        count=1,
    )

    if "R$" in template:
        return f"R$ {result}"
    if "$" in template:
        return f"${result}"
    return result
