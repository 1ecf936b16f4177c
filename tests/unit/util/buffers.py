"""Test the util.buffers module."""

# Builtins

import array

# Packages

from hex_fmt.util.buffers import byte_view, byte_views

import pytest


def test_byte_view_buffers():
    """Test whether byte_view views buffers as flat unsigned bytes."""
    assert byte_view(b'AB').tobytes() == b'AB'
    assert byte_view(bytearray(b'AB')).tobytes() == b'AB'
    assert byte_view(memoryview(b'AB')).tobytes() == b'AB'
    assert byte_view(array.array('b', [-1, 1])).tobytes() == b'\xff\x01'
    assert byte_view(array.array('b', [-1, 1])).format == 'B'
    assert len(byte_view(array.array('I', [0, 1]))) == 2 * array.array('I').itemsize


def test_byte_view_no_copy():
    """Test whether byte_view doesn't copy contiguous buffers."""
    buffer = bytearray(b'AB')
    view = byte_view(buffer)
    buffer[0] = 0x43
    assert view.tobytes() == b'CB'
    view.release()


def test_byte_view_noncontiguous():
    """Test whether byte_view handles non-contiguous views."""
    view = memoryview(bytes(range(8)))[::2]
    assert byte_view(view).tobytes() == bytes([0, 2, 4, 6])


def test_byte_view_iterables():
    """Test whether byte_view collects iterables of ints."""
    assert byte_view([9, 10, 11]).tobytes() == bytes([9, 10, 11])
    assert byte_view(range(3)).tobytes() == bytes([0, 1, 2])
    assert byte_view(iter([255])).tobytes() == b'\xff'
    assert byte_view([]).tobytes() == b''


def test_byte_view_invalid():
    """Test whether byte_view rejects things which aren't byte sequences."""
    with pytest.raises(ValueError):
        byte_view([256])
    with pytest.raises(ValueError):
        byte_view([-1])
    with pytest.raises(TypeError):
        byte_view('AB')
    with pytest.raises(TypeError):
        byte_view(3)
    with pytest.raises(TypeError):
        byte_view([1.0])


def test_byte_views():
    """Test whether byte_views makes a view for each item."""
    views = byte_views(iter([b'AB', [9, 10, 11]]))
    assert isinstance(views, tuple)
    assert [view.tobytes() for view in views] == [b'AB', bytes([9, 10, 11])]
    assert byte_views([]) == ()
