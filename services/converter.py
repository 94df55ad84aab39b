"""
services/converter.py
---------------------
Binary <-> decimal conversion of user-typed numbers.

Both directions work on signed 64-bit integers and return a result
object instead of raising, so the caller picks the reply from the
outcome:

    >>> binary_to_decimal("101")
    Converted(value='5')
    >>> decimal_to_binary("12a")
    ParseFailure(text='12a', reason='not a decimal integer')
"""

import re
from dataclasses import dataclass
from typing import Union

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
_UINT64_MASK = 2 ** 64 - 1

# int() alone would also accept whitespace, "_" separators and "0b" prefixes.
# \d matches any Unicode decimal digit, so "١٠١" is a valid binary number
_NUMBER_RE = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class Converted:
    value: str


@dataclass(frozen=True)
class ParseFailure:
    text: str
    reason: str


ConversionResult = Union[Converted, ParseFailure]


def _parse_int64(text: str, base: int, kind: str) -> Union[int, ParseFailure]:
    if not _NUMBER_RE.fullmatch(text):
        return ParseFailure(text, f"not a {kind} integer")
    try:
        number = int(text, base)
    except ValueError:
        return ParseFailure(text, f"not a {kind} integer")
    if not INT64_MIN <= number <= INT64_MAX:
        return ParseFailure(text, "out of 64-bit range")
    return number


def binary_to_decimal(text: str) -> ConversionResult:
    """
    Parse `text` as an optionally signed base-2 integer.

    Returns:
        Converted with the signed decimal string, or ParseFailure when the
        text has characters other than a sign and 0/1 digits or overflows
        int64. Any Unicode decimal digit counts, so "١٠١" is 5.
    """
    number = _parse_int64(text, 2, "binary")
    if isinstance(number, ParseFailure):
        return number
    return Converted(str(number))


def decimal_to_binary(text: str) -> ConversionResult:
    """
    Parse `text` as an optionally signed base-10 integer and render it in
    base 2 without prefix or leading zeros.

    Negative numbers are rendered as their 64-bit two's complement bit
    pattern, e.g. "-1" gives sixty-four "1" digits.
    """
    number = _parse_int64(text, 10, "decimal")
    if isinstance(number, ParseFailure):
        return number
    return Converted(format(number & _UINT64_MASK, "b"))
