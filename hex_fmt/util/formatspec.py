"""Support for the format spec mini-language of the hex formatting wrappers.

The wrappers accept a subset of the standard format spec used for strings:

    [[fill]align][0][width][.precision][x]

The precision is the maximum number of characters of hex output. Fill, align, the
zero flag and width then pad the rendered text exactly like str.__format__ would.
"""

# Builtins

import re

# Packages


FORMAT_SPEC = re.compile(
    r'(?:(?P<fill>.)?(?P<align>[<>^]))?'
    r'(?P<zero>0)?'
    r'(?P<width>\d+)?'
    r'(?:\.(?P<precision>\d+))?'
    r'(?P<type>x)?',
    re.DOTALL
)


class FormatSpec(object):
    """Parsed format spec for hex formatting wrappers."""

    def __init__(self, precision=None, fill=None, align=None, zero=False, width=None):
        """Initialize members.

        A precision of None means that the wrapper's default precision applies.
        """
        self.precision = precision
        self.fill = fill
        self.align = align
        self.zero = zero
        self.width = width

    def __repr__(self):
        """Represent as a string."""
        return '{}(precision={}, fill={!r}, align={!r}, zero={}, width={})'.format(
            self.__class__.__qualname__, self.precision, self.fill, self.align,
            self.zero, self.width
        )

    @classmethod
    def parse(cls, spec):
        """Parse a format spec string."""
        match = FORMAT_SPEC.fullmatch(spec)
        if match is None:
            raise ValueError('Invalid format specifier for hex output: {!r}'.format(spec))
        precision = match.group('precision')
        width = match.group('width')
        return cls(
            precision=int(precision) if precision is not None else None,
            fill=match.group('fill'),
            align=match.group('align'),
            zero=match.group('zero') is not None,
            width=int(width) if width is not None else None
        )

    def pad(self, text):
        """Pad the rendered text to the requested width."""
        if self.width is None:
            return text
        return format(text, '{}{}{}{}'.format(
            self.fill or '', self.align or '', '0' if self.zero else '', self.width
        ))
