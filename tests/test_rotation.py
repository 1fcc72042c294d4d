import io
import math
import struct

import pytest

from c3dkit.matrix44 import Matrix44
from c3dkit.rotation import ProcessorType, Rotation, read_float

ELEMENTS = [float(v) for v in range(1, 17)]


def test_processor_type_values_select_byte_order():
    intel = read_float(io.BytesIO(struct.pack("<f", 2.0)), ProcessorType(84))
    mips = read_float(io.BytesIO(struct.pack(">f", 2.0)), ProcessorType(86))
    assert intel == 2.0
    assert mips == 2.0


def test_default_rotation_is_empty():
    r = Rotation()
    assert r.reliability == -1.0
    assert not r.is_valid()
    assert r.is_empty()


def test_elements_and_reliability():
    r = Rotation(*ELEMENTS, reliability=0.5)
    assert r.reliability == 0.5
    assert r.is_valid()
    assert r == Matrix44(*ELEMENTS)


def test_set_without_reliability_sets_zero():
    r = Rotation()
    r.set(*ELEMENTS)
    assert r.reliability == 0.0
    assert r.is_valid()
    r.set(*ELEMENTS, reliability=-2.0)
    assert r.is_empty()


def test_write_read_round_trip():
    r = Rotation(*ELEMENTS, reliability=0.25)
    buffer = io.BytesIO()
    r.write(buffer)
    assert len(buffer.getvalue()) == 17 * 4
    buffer.seek(0)
    back = Rotation.read(buffer, ProcessorType.INTEL)
    assert back == r
    assert back.reliability == 0.25


def test_invalid_rotation_writes_nan():
    buffer = io.BytesIO()
    Rotation().write(buffer)
    buffer.seek(0)
    back = Rotation.read(buffer, ProcessorType.INTEL)
    assert all(math.isnan(v) for row in back.to_rows() for v in row)
    assert back.reliability == -1.0
    assert back.is_empty()


def test_read_is_column_major():
    values = list(range(16)) + [1]
    buffer = io.BytesIO(struct.pack("<17f", *values))
    r = Rotation.read(buffer, ProcessorType.INTEL)
    assert r[1, 0] == 1.0
    assert r[0, 1] == 4.0


def test_read_float_intel_and_mips():
    assert read_float(io.BytesIO(struct.pack("<f", 1.5)), ProcessorType.INTEL) == 1.5
    assert read_float(io.BytesIO(struct.pack(">f", 1.5)), ProcessorType.MIPS) == 1.5


def test_read_float_dec():
    little = struct.pack("<f", 1.5)
    dec = bytes((little[2], little[3] + 1, little[0], little[1]))
    assert read_float(io.BytesIO(dec), ProcessorType.DEC) == 1.5


def test_read_float_errors():
    with pytest.raises(EOFError):
        read_float(io.BytesIO(b"\x00\x00"), ProcessorType.INTEL)
    with pytest.raises(ValueError):
        read_float(io.BytesIO(b"\x00\x00\x00\x00"), "other")


def test_str_shows_reliability():
    text = str(Rotation(*ELEMENTS, reliability=0.5))
    lines = text.splitlines()
    assert len(lines) == 5
    assert lines[-1] == "Reliability = 0.5"
    assert lines[0] == "1, 2, 3, 4"


def test_copy_keeps_reliability():
    r = Rotation(*ELEMENTS, reliability=0.75)
    c = r.copy()
    c[0, 0] = 100.0
    assert c.reliability == 0.75
    assert r[0, 0] == 1.0