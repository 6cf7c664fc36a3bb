"""This module contains common datatypes, constants and exceptions"""

import locale
from typing import Final, Mapping, NamedTuple, Optional

# multiplier for combining coordinate hashes
HASH_FACTOR: Final[int] = 397

# tag used when a point is written as standalone element
DEFAULT_TAG_NAME: Final[str] = 'Point2D'

# attribute and element names of structured representation
MEMBER_X: Final[str] = 'X'
MEMBER_Y: Final[str] = 'Y'


class SpatialException(Exception):
    """Mark custom Exception"""


class InvalidArgumentError(SpatialException, ValueError):
    """Argument has wrong shape, length or value"""


class ParseError(SpatialException, ValueError):
    """Text doesn't match coordinate grammar"""


class FormatError(SpatialException, ValueError):
    """Structured data misses members or contains invalid numbers"""


class NumberFormat(NamedTuple):
    """numeric formatting convention

    Passed around explicitly instead of relying
    on the process wide locale settings.
    """
    decimal_separator: str = '.'
    group_separator: str = ','

    @property
    def coordinate_separator(self) -> str:
        """Separator between coordinates, must not clash with decimal separator"""
        return ';' if self.decimal_separator == ',' else ','

    def format_number(self, value: float, fmt: Optional[str] = None) -> str:
        """Render value with python format spec and map
        invariant separators onto this convention"""
        _rendered = format(float(value), fmt or '')
        if self.decimal_separator == '.' and self.group_separator == ',':
            return _rendered
        _table = str.maketrans({'.': self.decimal_separator,
                                ',': self.group_separator})
        return _rendered.translate(_table)

    @staticmethod
    def from_localeconv(conv: Mapping[str, str]) -> 'NumberFormat':
        _decimal = conv.get('decimal_point') or '.'
        _group = conv.get('thousands_sep') or ('.' if _decimal == ',' else ',')
        return NumberFormat(_decimal, _group)

    @staticmethod
    def current() -> 'NumberFormat':
        """Read convention of current process locale"""
        return NumberFormat.from_localeconv(locale.localeconv())


INVARIANT: Final[NumberFormat] = NumberFormat('.', ',')


def unordered(self, other):
    """Comparison hook for value types without an order"""
    raise TypeError(f"'{type(self).__name__}' instances are not ordered")
