"""Formatting of lists of byte sequences as shortened hexadecimal strings."""

# Builtins

# Packages

from hex_fmt.encoding import DEFAULT_PRECISION, check_precision, format_hex_view
from hex_fmt.util.buffers import byte_views
from hex_fmt.util.formatspec import FormatSpec


def format_hex_views(views, precision):
    """Format a sequence of byte views as a list, assuming a valid precision."""
    return '[{}]'.format(', '.join(format_hex_view(view, precision) for view in views))


def format_hex_list(items, precision=DEFAULT_PRECISION):
    """Return a bracketed, comma-separated list of hex strings for the byte sequences.

    The precision bounds each item on its own, as if it was formatted by format_hex;
    it is not a budget shared across the list.
    """
    check_precision(precision)
    return format_hex_views(byte_views(items), precision)


class HexList(object):
    """Wrapper for a list of byte sequences which formats them as shortened hex strings.

    The items are collected when the wrapper is created, so any iterable can be
    passed, including generators. Formatting works as for HexFmt, except that the
    precision applies to each item and the padding applies to the whole list.
    """

    def __init__(self, items):
        """Initialize members."""
        self.items = tuple(items)

    def render(self, precision=DEFAULT_PRECISION):
        """Render the items with the given precision."""
        return format_hex_list(self.items, precision)

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
