"""Utilities for working with byte buffers."""

# Builtins

# Packages


def byte_view(data):
    """Make a flat read-only view of unsigned bytes from a buffer or an iterable of ints.

    Objects supporting the buffer protocol are viewed without copying whenever they
    are contiguous. Anything else is collected into a new bytes object, so its items
    must be ints in range(256).
    """
    try:
        view = memoryview(data)
    except TypeError:
        return memoryview(bytes(iter(data)))
    try:
        return view.cast('B')
    except TypeError:  # not C-contiguous
        return memoryview(view.tobytes())


def byte_views(items):
    """Make a tuple of byte views from an iterable of byte sequences."""
    return tuple(byte_view(item) for item in items)
