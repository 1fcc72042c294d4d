"""Force platform analysis from the FORCE_PLATFORM parameters and analog data."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from .matrix import Matrix
from .square import Matrix33, Matrix66
from .vector import Vector3d, Vector6d

_NOT_FILLED = "FORCE_PLATFORM:{} is not fill properly to extract Force platform informations"


@dataclass(frozen=True)
class ParameterValue:
    """Values of a parameter with their dimensions; the dimension defaults to (len,)."""

    values: tuple = ()
    dimension: tuple = field(default=None)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))
        if self.dimension is None:
            object.__setattr__(self, "dimension", (len(self.values),))
        else:
            object.__setattr__(self, "dimension", tuple(int(d) for d in self.dimension))

    def as_floats(self) -> list[float]:
        """The values converted to floats."""
        return [float(v) for v in self.values]

    def as_ints(self) -> list[int]:
        """The values converted to integers."""
        return [int(v) for v in self.values]


def _as_parameter(value: Any) -> ParameterValue:
    if isinstance(value, ParameterValue):
        return value
    if isinstance(value, (str, bytes)):
        return ParameterValue((value,))
    if isinstance(value, Sequence):
        return ParameterValue(tuple(value))
    return ParameterValue((value,))


def _group(parameters: Mapping[str, Mapping[str, Any]], name: str) -> Mapping[str, Any]:
    try:
        return parameters[name]
    except KeyError:
        raise KeyError(f"Group {name} is not present in the parameters") from None


def _parameter(group: Mapping[str, Any], group_name: str, name: str) -> ParameterValue:
    if name not in group:
        raise KeyError(f"Parameter {group_name}:{name} is not present")
    return _as_parameter(group[name])


def _div(numerator: float, denominator: float) -> float:
    """Floating point division that yields inf or nan instead of raising."""
    if denominator != 0:
        return numerator / denominator
    if math.isnan(numerator) or numerator == 0:
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _vector_rows(vectors: Sequence[Vector3d]) -> list[list[float]]:
    return Matrix.from_columns(vectors).to_rows(transpose=True)


class ForcePlatform:
    """Forces, moments and centre of pressure of one force platform.

    The Z axis is assumed to point upward.
    """

    def __init__(
        self,
        idx: int,
        parameters: Mapping[str, Mapping[str, Any]],
        analog_subframes: Iterable[Sequence[float]],
    ) -> None:
        self._point = _group(parameters, "POINT")
        self._fp = _group(parameters, "FORCE_PLATFORM")
        self.type = 0
        self.cal_matrix = Matrix66()
        self.corners: list[Vector3d] = []
        self.mean_corners = Vector3d()
        self.origin = Vector3d()
        self._ref_frame = Matrix33()
        self.forces: list[Vector3d] = []
        self.moments: list[Vector3d] = []
        self.cop: list[Vector3d] = []
        self.tz: list[Vector3d] = []
        self._cop_poly: list[float] = []

        self._extract_units()
        self._extract_type(idx)
        self._extract_corners(idx)
        self._extract_origin(idx)
        self._extract_cal_matrix(idx)
        self._compute_reference_frame()
        self._extract_data(idx, analog_subframes)

    # ---- extraction ----

    def _extract_units(self) -> None:
        units = self._point.get("UNITS")
        if units is not None and _as_parameter(units).dimension[0] > 0:
            self.position_unit = str(_as_parameter(units).values[0])
        else:
            self.position_unit = "m"

        units = self._fp.get("UNITS")
        if units is not None and _as_parameter(units).dimension[0] > 0:
            self.force_unit = str(_as_parameter(units).values[0])
        else:
            self.force_unit = "N"

        self.moment_unit = self.force_unit + self.position_unit

    def _extract_type(self, idx: int) -> None:
        types = _parameter(self._fp, "FORCE_PLATFORM", "TYPE").as_ints()
        if len(types) < idx + 1:
            raise ValueError(_NOT_FILLED.format("IDX"))
        kind = types[idx]
        self.type = kind

        if kind in (1, 2, 4):
            return
        if kind == 3:
            self._cop_poly = [0.0] * 12
            if "FPCOPPOLY" in self._fp:
                poly = _as_parameter(self._fp["FPCOPPOLY"]).as_floats()
                if poly:
                    chunk = poly[idx * 12 : (idx + 1) * 12]
                    if len(chunk) != 12:
                        raise ValueError(_NOT_FILLED.format("FPCOPPOLY"))
                    self._cop_poly = chunk
            return
        if kind in (5, 6, 7):
            raise ValueError(f"Type {kind} is not supported yet")
        if kind in (11, 12):
            raise ValueError(
                "Kistler Split Belt Treadmill is not supported for ForcePlatform analysis"
            )
        if kind == 21:
            raise ValueError("AMTI-stairs is not supported for ForcePlatform analysis")
        raise ValueError("Force platform type is non existant or not supported yet")

    def _extract_corners(self, idx: int) -> None:
        values = _parameter(self._fp, "FORCE_PLATFORM", "CORNERS").as_floats()
        if len(values) < 12 * (idx + 1):
            raise ValueError(_NOT_FILLED.format("CORNER"))
        base = idx * 12
        self.corners = [
            Vector3d(*values[base + i * 3 : base + i * 3 + 3]) for i in range(4)
        ]
        total = Vector3d()
        for corner in self.corners:
            total = Vector3d.from_matrix(total + corner)
        self.mean_corners = Vector3d.from_matrix(total / 4)

    def _extract_origin(self, idx: int) -> None:
        values = _parameter(self._fp, "FORCE_PLATFORM", "ORIGIN").as_floats()
        if len(values) < 3 * (idx + 1):
            raise ValueError(_NOT_FILLED.format("ORIGIN"))
        origin = values[idx * 3 : idx * 3 + 3]
        if self.type == 1:
            origin[0] = origin[1] = 0.0
        self.origin = Vector3d(*origin)
        if 1 <= self.type <= 4 and self.origin.z > 0.0:
            self.origin = Vector3d.from_matrix(-1 * self.origin)

    def _extract_cal_matrix(self, idx: int) -> None:
        nb_channels = 6
        if "CAL_MATRIX" not in self._fp:
            if self.type == 2:
                return
            raise ValueError(
                "FORCE_PLATFORM:CAL_MATRIX was not found, but is required "
                "for the type of force platform"
            )

        param = _as_parameter(self._fp["CAL_MATRIX"])
        dims = param.dimension
        if len(dims) < 3 or dims[2] <= idx:
            if self.type in (1, 2, 3):
                return
            raise ValueError(_NOT_FILLED.format("CAL_MATRIX"))

        values = param.as_floats()
        if not values:
            self.cal_matrix.set_identity()
            return
        skip = dims[0] * dims[1]
        for i in range(nb_channels):
            for j in range(nb_channels):
                self.cal_matrix[i, j] = values[skip * idx + j * nb_channels + i]

    def _compute_reference_frame(self) -> None:
        axis_x = Vector3d.from_matrix(self.corners[0] - self.corners[1])
        axis_y = Vector3d.from_matrix(self.corners[0] - self.corners[3])
        axis_z = axis_x.cross(axis_y)
        axis_y = axis_z.cross(axis_x)
        for axis in (axis_x, axis_y, axis_z):
            axis.normalize()
        for i in range(3):
            self._ref_frame[i, 0] = axis_x[i]
            self._ref_frame[i, 1] = axis_y[i]
            self._ref_frame[i, 2] = axis_z[i]

    def _extract_data(self, idx: int, analog_subframes: Iterable[Sequence[float]]) -> None:
        nb_channels = 8 if self.type == 3 else 6
        channel = _parameter(self._fp, "FORCE_PLATFORM", "CHANNEL")
        dims = channel.dimension
        if dims[0] < nb_channels:
            raise ValueError(_NOT_FILLED.format("CHANNEL"))
        if len(dims) < 2 or dims[1] < idx + 1:
            raise ValueError(_NOT_FILLED.format("CHANNEL"))
        all_channels = channel.as_ints()
        channel_idx = [all_channels[idx * dims[0] + i] - 1 for i in range(nb_channels)]

        for subframe in analog_subframes:
            ch = [float(subframe[c]) for c in channel_idx]
            if self.type == 1:
                self._add_type1(ch)
            else:
                self._add_type234(ch)

    def _add_type1(self, ch: list[float]) -> None:
        ref = self._ref_frame
        force = ref * Vector3d(ch[0], ch[1], ch[2])
        cop = ref * Vector3d(ch[3], ch[4], 0.0)
        tz = ref * Vector3d(0.0, 0.0, ch[5])
        self.forces.append(force)
        self.moments.append(Vector3d.from_matrix(force.cross(cop) - tz))
        self.cop.append(Vector3d.from_matrix(cop + self.mean_corners))
        self.tz.append(tz)

    def _add_type234(self, ch: list[float]) -> None:
        ref, origin = self._ref_frame, self.origin
        if self.type == 3:
            force_raw = Vector3d(ch[0] + ch[1], ch[2] + ch[3], ch[4] + ch[5] + ch[6] + ch[7])
            moment_raw = Vector3d(
                origin.y * (ch[4] + ch[5] - ch[6] - ch[7]),
                origin.x * (ch[5] + ch[6] - ch[4] - ch[7]),
                origin.y * (ch[1] - ch[0]) + origin.x * (ch[2] - ch[3]),
            )
            moment_raw = Vector3d.from_matrix(
                moment_raw + force_raw.cross(Vector3d(0.0, 0.0, origin.z))
            )
        else:
            data = Vector6d(*ch[:6])
            if self.type == 4:
                data = self.cal_matrix * data
            force_raw = Vector3d(data[0], data[1], data[2])
            moment_raw = Vector3d(data[3], data[4], data[5])
            moment_raw = Vector3d.from_matrix(moment_raw + force_raw.cross(origin))

        self.forces.append(ref * force_raw)
        self.moments.append(ref * moment_raw)

        cop_raw = Vector3d(
            _div(-moment_raw.y, force_raw.z), _div(moment_raw.x, force_raw.z), 0.0
        )
        if self.type == 3:
            p = self._cop_poly
            x, y = cop_raw.x, cop_raw.y
            x_offset = (p[0] * y**4 + p[1] * y**2 + p[2]) * x**3 + (
                p[3] * y**4 + p[4] * y**2 + p[5]
            ) * x
            y_offset = (p[6] * x**4 + p[7] * x**2 + p[8]) * y**3 + (
                p[9] * x**4 + p[10] * x**2 + p[11]
            ) * y
            cop_raw = Vector3d(x - x_offset, y - y_offset, 0.0)

        self.cop.append(Vector3d.from_matrix(ref * cop_raw + self.mean_corners))
        at_cop = Vector3d.from_matrix(moment_raw - force_raw.cross(Vector3d.from_matrix(-1 * cop_raw)))
        self.tz.append(ref * at_cop)

    # ---- results ----

    def nb_frames(self) -> int:
        """Number of recorded instants, subframes included."""
        return len(self.forces)

    def as_dict(self) -> dict[str, Any]:
        """Data and metadata as plain lists, with x, y, z as columns."""
        return {
            "forces": _vector_rows(self.forces),
            "moments": _vector_rows(self.moments),
            "cop": _vector_rows(self.cop),
            "tz": _vector_rows(self.tz),
            "meta": {
                "frames": self.nb_frames(),
                "funit": self.force_unit,
                "munit": self.moment_unit,
                "punit": self.position_unit,
                "calmatrix": self.cal_matrix.to_rows(transpose=True),
                "corners": _vector_rows(self.corners),
                "origin": self.origin.to_rows(transpose=True),
            },
        }


class ForcePlatforms:
    """All the force platforms declared by FORCE_PLATFORM:USED."""

    def __init__(
        self,
        parameters: Mapping[str, Mapping[str, Any]],
        analog_subframes: Iterable[Sequence[float]],
    ) -> None:
        subframes = [list(subframe) for subframe in analog_subframes]
        group = _group(parameters, "FORCE_PLATFORM")
        used = _parameter(group, "FORCE_PLATFORM", "USED").as_ints()
        count = used[0] if used else 0
        self._platforms = [ForcePlatform(i, parameters, subframes) for i in range(count)]

    def platform(self, idx: int) -> ForcePlatform:
        """Return the platform at ``idx``."""
        if not 0 <= idx < len(self._platforms):
            raise IndexError(
                f"Force platform {idx} requested while there are {len(self._platforms)}"
            )
        return self._platforms[idx]

    def __iter__(self) -> Iterator[ForcePlatform]:
        return iter(self._platforms)

    def __len__(self) -> int:
        return len(self._platforms)