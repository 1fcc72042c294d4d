# c3dkit

c3dkit provides building blocks for working with C3D motion-capture recordings, a format widely used in biomechanics. It is pure Python and has no dependencies beyond the standard library.

## What is in it

- `c3dkit.matrix.Matrix` is a dense matrix of floats stored column by column.
  - Elements are read and written as `m[row, col]`. An out-of-range index raises `IndexError`.
  - It supports `+`, `-` and `*` with scalars and with other matrices, and `/` by a scalar. The in-place forms work too.
  - Matrices of mismatched shape raise `ValueError`.
  - Further methods: `sum()`, `set_zeros()`, `set_ones()`, `set_identity()`, `resize()` and `copy()`.
  - `transpose()` returns the transposed matrix. `to_rows(transpose=False)` returns plain nested lists.
  - `Matrix.from_columns(columns)` builds a matrix from a sequence of columns.
- `c3dkit.vector.Vector3d` and `Vector6d` are fixed-size column vectors.
  - Both take a single integer index: `v[0]`.
  - `Vector3d` has the `x`, `y` and `z` properties, plus `set()`, `dot()`, `cross()`, `norm()`, `normalize()` and `is_valid()`. `is_valid()` is false when any component is NaN.
  - `from_matrix()` converts a matrix of the right shape into a vector.
  - Calling `resize()` raises `TypeError`.
- `c3dkit.square.Matrix33` and `Matrix66` are fixed-size square matrices.
  - `Matrix33` can be built from nine elements given row by row. It multiplies with a `Vector3d` or another `Matrix33`.
  - `Matrix66` multiplies with a `Vector6d`.
- `c3dkit.matrix44.Matrix44` is a 4x4 matrix.
  - It is built, or `set()`, from sixteen elements given row by row.
  - Multiplying it by a `Vector3d` applies it as a homogeneous transform.
- `c3dkit.rotation` provides rotations and float reading.
  - `Rotation` is a `Matrix44` with a `reliability` value. A negative reliability marks the rotation as empty; see `is_valid()` and `is_empty()`.
  - `Rotation.read(stream, processor_type)` reads the sixteen elements, column-major, then the reliability, as 4-byte floats.
  - `write(stream)` writes them as little-endian floats. When the rotation is empty, the elements are written as NaN.
  - `read_float(stream, processor_type)` decodes one float according to a `ProcessorType` (`INTEL`, `DEC` or `MIPS`).
- `c3dkit.rotations` describes the rotation data of a frame.
  - `RotationsInfo.from_parameters(parameters, frame_rate, processor_type)` reads the ROTATION group (`DATA_START`, `USED`, and `RATIO` or `RATE`) from a mapping of group name to parameter name to values.
  - `RotationSubFrame` holds the rotations of one subframe.
  - `Rotations` holds the subframes of one frame.
  - Both read from, and write to, binary streams, and both are iterable.
- `c3dkit.forceplatform` computes force platform data.
  - `ForcePlatforms(parameters, analog_subframes)` builds one `ForcePlatform` for each platform counted in `FORCE_PLATFORM:USED`. It uses the POINT and FORCE_PLATFORM parameter groups and the analog values of every subframe.
  - Platform types 1 to 4 are supported. Other types raise `ValueError`.
  - Each platform exposes `forces`, `moments`, `cop` and `tz` (lists of `Vector3d` in the global frame), along with `corners`, `mean_corners`, `origin`, `cal_matrix` and the units.
  - `as_dict()` returns everything as plain lists, with x, y and z as columns.
  - A parameter may be given as a plain sequence. Use `ParameterValue(values, dimension)` where the dimensions matter, as they do for `CHANNEL` and `CAL_MATRIX`.

## Installation

```
pip install .
```

## Examples

```python
from c3dkit.vector import Vector3d
from c3dkit.square import Matrix33

v = Vector3d(1.0, 0.0, 0.0)
w = Vector3d(0.0, 1.0, 0.0)
print(v.cross(w))            # Vector = [0, 0, 1]

m = Matrix33()
m.set_identity()
print(m * v)                 # Vector = [1, 0, 0]
```

A rotation can be written to a binary stream and read back from it:

```python
import io
from c3dkit.rotation import ProcessorType, Rotation

rot = Rotation(1, 0, 0, 0,
               0, 1, 0, 0,
               0, 0, 1, 0,
               0, 0, 0, 1, reliability=1.0)
buffer = io.BytesIO()
rot.write(buffer)
buffer.seek(0)
again = Rotation.read(buffer, ProcessorType.INTEL)
```

Force platform data comes from plain parameter mappings and analog subframes:

```python
from c3dkit.forceplatform import ForcePlatforms, ParameterValue

parameters = {
    "POINT": {"UNITS": ["mm"]},
    "FORCE_PLATFORM": {
        "USED": [1],
        "TYPE": [2],
        "CORNERS": [1, 1, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0],
        "ORIGIN": [0, 0, 0],
        "CHANNEL": ParameterValue((1, 2, 3, 4, 5, 6), dimension=(6, 1)),
    },
}
subframes = [[0.0, 0.0, 100.0, 0.0, 0.0, 0.0]]

for platform in ForcePlatforms(parameters, subframes):
    data = platform.as_dict()
    print(data["meta"]["funit"], data["forces"])
```

## What it does not do

This package does not open or save whole C3D files. It does not parse or write the header, the parameter section, or the point and analog data blocks. It offers no command-line tool. Its callers provide the parameters and analog values, and the binary streams positioned at rotation data.

## Running the tests

```
pip install .[test]
pytest
```