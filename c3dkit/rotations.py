"""Rotation data of a C3D frame: the layout information, subframes and holders."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, BinaryIO

from .rotation import ProcessorType, Rotation


def _first(value: Any) -> Any:
    """Return the first element of a parameter value, or the value itself."""
    if isinstance(value, (str, bytes)):
        return value
    if isinstance(value, Sequence):
        if not value:
            raise ValueError("Parameter holds no value")
        return value[0]
    return value


@dataclass(frozen=True)
class RotationsInfo:
    """Layout of the rotation data as declared in the ROTATION parameter group."""

    has_group: bool = False
    data_start: int = -1
    used: int = 0
    ratio: int = 0
    processor_type: ProcessorType = ProcessorType.INTEL

    @classmethod
    def from_parameters(
        cls,
        parameters: Mapping[str, Mapping[str, Any]],
        frame_rate: float,
        processor_type: ProcessorType = ProcessorType.INTEL,
    ) -> RotationsInfo:
        """Read the ROTATION group from ``parameters`` (group -> name -> values)."""
        group = parameters.get("ROTATION")
        if group is None:
            return cls(processor_type=processor_type)

        if "DATA_START" not in group:
            raise ValueError("DATA_START is not present in ROTATION.")
        data_start = int(_first(group["DATA_START"]))

        if "USED" not in group:
            raise ValueError("USED is not present in ROTATION.")
        used = int(_first(group["USED"]))

        if "RATIO" in group:
            ratio = int(_first(group["RATIO"]))
        elif "RATE" in group:
            ratio = int(float(_first(group["RATE"])) / frame_rate)
        else:
            raise ValueError("RATIO or RATE must be present in ROTATION.")

        return cls(
            has_group=True,
            data_start=data_start,
            used=used,
            ratio=ratio,
            processor_type=ProcessorType(processor_type),
        )


class RotationSubFrame:
    """The rotations recorded at one subframe."""

    def __init__(self, rotations: Iterable[Rotation] | None = None) -> None:
        self._rotations: list[Rotation] = list(rotations) if rotations else []

    @classmethod
    def read(cls, stream: BinaryIO, info: RotationsInfo) -> RotationSubFrame:
        """Read ``info.used`` rotations from ``stream``."""
        return cls(
            Rotation.read(stream, info.processor_type) for _ in range(info.used)
        )

    def nb_rotations(self) -> int:
        """Number of rotations in the subframe."""
        return len(self._rotations)

    def resize(self, nb_rotations: int) -> None:
        """Set the number of rotations; extra ones are dropped, new ones are empty."""
        if nb_rotations < 0:
            raise ValueError("Number of rotations cannot be negative")
        current = len(self._rotations)
        if nb_rotations <= current:
            del self._rotations[nb_rotations:]
        else:
            self._rotations.extend(Rotation() for _ in range(nb_rotations - current))

    def rotation(self, idx: int) -> Rotation:
        """Return the rotation at ``idx``."""
        if not 0 <= idx < len(self._rotations):
            raise IndexError(
                f"Subframe.rotation method is trying to access the rotation {idx} "
                f"while the maximum number of rotations is {len(self._rotations)}."
            )
        return self._rotations[idx]

    def set_rotation(self, rotation: Rotation, idx: int | None = None) -> None:
        """Append ``rotation``, or place it at ``idx``, growing with empty ones."""
        if idx is None:
            self._rotations.append(rotation)
            return
        if idx < 0:
            raise IndexError("Rotation index cannot be negative")
        if idx >= len(self._rotations):
            self.resize(idx + 1)
        self._rotations[idx] = rotation

    def is_empty(self) -> bool:
        """True when every rotation is empty."""
        return all(rotation.is_empty() for rotation in self._rotations)

    def write(self, stream: BinaryIO) -> None:
        """Write every rotation to ``stream``."""
        for rotation in self._rotations:
            rotation.write(stream)

    def __iter__(self) -> Iterator[Rotation]:
        return iter(self._rotations)

    def __len__(self) -> int:
        return len(self._rotations)

    def __str__(self) -> str:
        return "\n".join(
            f"Rotation: {j}\n{rotation}" for j, rotation in enumerate(self._rotations)
        )


class Rotations:
    """The rotation subframes of one frame."""

    def __init__(self, subframes: Iterable[RotationSubFrame] | None = None) -> None:
        self._subframes: list[RotationSubFrame] = list(subframes) if subframes else []

    @classmethod
    def read(
        cls, stream: BinaryIO, info: RotationsInfo, has_rotational_data: bool
    ) -> Rotations:
        """Read ``info.ratio`` subframes, or nothing if the file has no rotations."""
        if not has_rotational_data:
            return cls()
        return cls(RotationSubFrame.read(stream, info) for _ in range(info.ratio))

    def nb_subframes(self) -> int:
        """Number of subframes."""
        return len(self._subframes)

    def resize(self, nb_subframes: int) -> None:
        """Set the number of subframes; extra ones are dropped, new ones are empty."""
        if nb_subframes < 0:
            raise ValueError("Number of subframes cannot be negative")
        current = len(self._subframes)
        if nb_subframes <= current:
            del self._subframes[nb_subframes:]
        else:
            self._subframes.extend(
                RotationSubFrame() for _ in range(nb_subframes - current)
            )

    def subframe(self, idx: int) -> RotationSubFrame:
        """Return the subframe at ``idx``."""
        if not 0 <= idx < len(self._subframes):
            raise IndexError(
                f"Rotations.subframe method is trying to access the subframe {idx} "
                f"while the maximum number of subframes is {len(self._subframes)}."
            )
        return self._subframes[idx]

    def set_subframe(self, subframe: RotationSubFrame, idx: int | None = None) -> None:
        """Append ``subframe``, or place it at ``idx``, growing with empty ones."""
        if idx is None:
            self._subframes.append(subframe)
            return
        if idx < 0:
            raise IndexError("Subframe index cannot be negative")
        if idx >= len(self._subframes):
            self.resize(idx + 1)
        self._subframes[idx] = subframe

    def is_empty(self) -> bool:
        """True when every subframe is empty."""
        return all(subframe.is_empty() for subframe in self._subframes)

    def write(self, stream: BinaryIO) -> None:
        """Write every subframe to ``stream``."""
        for subframe in self._subframes:
            subframe.write(stream)

    def __iter__(self) -> Iterator[RotationSubFrame]:
        return iter(self._subframes)

    def __len__(self) -> int:
        return len(self._subframes)

    def __str__(self) -> str:
        return "\n".join(
            f"Subframe = {i}\n{subframe}\n" for i, subframe in enumerate(self._subframes)
        )