"""Rotation matrices with a reliability metric, as stored in C3D files."""

from __future__ import annotations

import enum
import math
import struct
from typing import BinaryIO

from .matrix44 import Matrix44

_FLOAT_SIZE = 4


class ProcessorType(enum.IntEnum):
    """Binary formatting convention of the machine that wrote the file."""

    INTEL = 84
    DEC = 85
    MIPS = 86


def read_float(stream: BinaryIO, processor_type: ProcessorType) -> float:
    """Read one 4-byte float from ``stream`` using the given convention."""
    raw = stream.read(_FLOAT_SIZE)
    if len(raw) != _FLOAT_SIZE:
        raise EOFError("Unexpected end of stream while reading a float")
    if processor_type == ProcessorType.INTEL:
        ordered = raw
    elif processor_type == ProcessorType.DEC:
        high = raw[1] - 1 if raw[1] != 0 else raw[1]
        ordered = bytes((raw[2], raw[3], raw[0], high))
    elif processor_type == ProcessorType.MIPS:
        ordered = raw[::-1]
    else:
        raise ValueError("Wrong type of processor for floating points")
    return struct.unpack("<f", ordered)[0]


class Rotation(Matrix44):
    """A 4x4 rotation matrix; a negative reliability marks it as empty."""

    def __init__(self, *args: float, reliability: float | None = None) -> None:
        super().__init__()
        if args:
            self.set(*args, reliability=reliability)
        else:
            self.reliability = -1.0 if reliability is None else float(reliability)

    @classmethod
    def read(cls, stream: BinaryIO, processor_type: ProcessorType) -> Rotation:
        """Read sixteen column-major elements followed by the reliability."""
        result = cls()
        result._data = [read_float(stream, processor_type) for _ in range(16)]
        result.reliability = read_float(stream, processor_type)
        return result

    def set(self, *args: float, reliability: float | None = None) -> None:
        """Set the sixteen elements row by row; reliability defaults to zero."""
        super().set(*args)
        self.reliability = 0.0 if reliability is None else float(reliability)

    def is_valid(self) -> bool:
        """True when the reliability is not negative."""
        return not self.reliability < 0

    def is_empty(self) -> bool:
        """True when the rotation is not valid."""
        return not self.is_valid()

    def write(self, stream: BinaryIO) -> None:
        """Write the elements (NaN when invalid) and the reliability as floats."""
        invalid = self.reliability < 0
        values = [math.nan if invalid else v for v in self._data]
        values.append(self.reliability)
        stream.write(struct.pack("<17f", *values))

    def __str__(self) -> str:
        lines = [", ".join(f"{value:g}" for value in row) for row in self.to_rows()]
        lines.append(f"Reliability = {self.reliability:g}")
        return "\n".join(lines)