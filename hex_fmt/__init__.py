"""Formatting and shortening of byte sequences as hexadecimal strings.

Provides wrappers for byte sequences and lists of byte sequences which render the
bytes as lowercase hex, eliding from the middle if the output would be longer than
the precision of the format spec.
"""

from hex_fmt.encoding import DEFAULT_PRECISION, ELLIPSIS, HexFmt, format_hex
from hex_fmt.lists import HexList, format_hex_list

__all__ = [
    'DEFAULT_PRECISION',
    'ELLIPSIS',
    'HexFmt',
    'HexList',
    'format_hex',
    'format_hex_list'
]
