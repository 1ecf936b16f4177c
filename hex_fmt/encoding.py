"""Formatting of byte sequences as shortened hexadecimal strings.

A byte sequence is rendered as two lowercase hex digits per byte. If that would be
longer than the precision, digits are elided from the middle and replaced with an
ellipsis, so that the output is exactly as long as the precision while showing as
much of the start and the end of the data as possible:

    >>> nine_to_f = bytes(range(9, 16))
    >>> format_hex(nine_to_f, None)
    '090a0b0c0d0e0f'
    >>> format_hex(nine_to_f)
    '090a..0e0f'
    >>> '{:.7}'.format(HexFmt(nine_to_f))
    '090..0f'
    >>> '{:.8}'.format(HexFmt(nine_to_f))
    '090..e0f'
"""

# Builtins

# Packages

from hex_fmt.util.buffers import byte_view
from hex_fmt.util.formatspec import FormatSpec


DEFAULT_PRECISION = 10
ELLIPSIS = '..'


def check_precision(precision):
    """Validate a precision value, which may be None for unbounded output."""
    if precision is None:
        return
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise TypeError('Precision must be an int or None, not {}'.format(
            type(precision).__qualname__
        ))
    if precision < 0:
        raise ValueError('Invalid precision is negative: {}'.format(precision))


def split_hex_digits(precision):
    """Return the numbers of hex digits to show left and right of the ellipsis.

    The left side gets the extra digit when the available digits can't be split
    evenly.
    """
    num_hex_digits = max(precision - len(ELLIPSIS), 0)
    right = num_hex_digits // 2
    left = num_hex_digits - right
    return (left, right)


def format_hex_view(view, precision):
    """Format a flat view of unsigned bytes, assuming a valid precision."""
    # If the data is short enough, don't shorten it.
    if precision is None or 2 * len(view) <= precision:
        return view.hex()

    # If the ellipsis fills the maximum width, print only (part of) that.
    if precision <= len(ELLIPSIS):
        return ELLIPSIS[:precision]

    (left, right) = split_hex_digits(precision)
    # An odd digit count includes one nibble of a byte next to the ellipsis.
    head = view[:(left + 1) // 2].hex()[:left]
    tail = view[len(view) - (right + 1) // 2:].hex()[right % 2:]
    return head + ELLIPSIS + tail


def format_hex(data, precision=DEFAULT_PRECISION):
    """Return a lowercase hex string for the bytes, elided to at most precision chars.

    data can be any object supporting the buffer protocol or any iterable of ints in
    range(256). A precision of None renders every byte.
    """
    check_precision(precision)
    return format_hex_view(byte_view(data), precision)


class HexFmt(object):
    """Wrapper for a byte sequence which formats it as a shortened hex string.

    The wrapper only keeps a reference to the data and renders it when converted to
    a string, so it is cheap to pass as an argument to a logging call:

        logger.debug('Received %s', HexFmt(buffer))

    str() and repr() use the default precision. format() and f-strings accept
    [[fill]align][width][.precision][x] as the format spec.
    """

    def __init__(self, data):
        """Initialize members."""
        self.data = data

    def render(self, precision=DEFAULT_PRECISION):
        """Render the data with the given precision."""
        return format_hex(self.data, precision)

    def __str__(self):
        """Represent as a string."""
        return self.render()

    def __repr__(self):
        """Represent as a string."""
        return self.render()

    def __format__(self, spec):
        """Represent as a string according to a format spec."""
        spec = FormatSpec.parse(spec)
        if spec.precision is None:
            spec.precision = DEFAULT_PRECISION
        return spec.pad(self.render(spec.precision))
