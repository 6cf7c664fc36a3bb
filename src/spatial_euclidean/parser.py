"""Parse coordinate pairs from text"""

import re
from typing import Dict, Pattern, Tuple

from .common import (
    INVARIANT,
    NumberFormat,
    ParseError,
)

_NUMBER_TEMPLATE = r'[+-]?(?:(?:\d+(?:{dec}\d*)?|{dec}\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)'
_PATTERNS: Dict[str, Pattern] = {}


def _pattern_for(number_format: NumberFormat) -> Pattern:
    _dec = number_format.decimal_separator
    if _dec not in _PATTERNS:
        _number = _NUMBER_TEMPLATE.format(dec=re.escape(_dec))
        # pair separators must not clash with decimal separator
        _sep = r'\s*;\s*|\s+' if _dec == ',' else r'\s*[,;]\s*|\s+'
        _pair = rf'({_number})(?:{_sep})({_number})'
        _PATTERNS[_dec] = re.compile(rf'^\s*(?:\(\s*{_pair}\s*\)|{_pair})\s*$', re.IGNORECASE)
    return _PATTERNS[_dec]


def parse_item_2d(text: str, number_format: NumberFormat = INVARIANT) -> Tuple[float, float]:
    """Extract exactly two numbers from text like '(x, y)' or 'x,y'"""

    if not isinstance(text, str):
        raise ParseError(f"expected text, got {type(text)}")
    # pair groups appear twice, with and without parentheses
    match = _pattern_for(number_format).match(text)
    if not match:
        raise ParseError(f"Invalid coordinates: '{text}'")
    _groups = [g for g in match.groups() if g is not None]
    _dec = number_format.decimal_separator
    x_str, y_str = (g.replace(_dec, '.') for g in _groups)
    return float(x_str), float(y_str)
