import struct

import pytest


def make_dpx(width, height, rows=None, data_offset=0, magic=b'SDPX', header_extra=None):
    """
    Build a synthetic 16-bit RGBA DPX file

    rows: list of per-row sample lists (width * 4 values each); defaults to zeros
    header_extra: {offset: bytes} patched into the header. Fields past the
        dimensions grow the header, and data_offset then points after them.
    """
    header_extra = header_extra or {}
    size = max([780, data_offset] + [offset + len(value) for offset, value in header_extra.items()])
    if size > 780 and data_offset == 0:
        data_offset = size

    header = bytearray(size)
    header[0:4] = magic
    struct.pack_into('>I', header, 4, data_offset)
    struct.pack_into('>2I', header, 772, width, height)
    for offset, value in header_extra.items():
        header[offset:offset + len(value)] = value

    if rows is None:
        rows = [[0] * (width * 4) for _ in range(height)]
    pixels = b''.join(struct.pack(f'>{len(row)}H', *row) for row in rows)
    return bytes(header) + pixels


@pytest.fixture
def dpx_bytes():
    return make_dpx
