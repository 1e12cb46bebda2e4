"""Description of a sound to load or play."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import Tuple, Union

Vec3 = Tuple[float, float, float]


class SoundType(enum.IntEnum):
    VFX = 0
    MUSIC = 1


def _format_number(value: float) -> str:
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


@dataclass
class SoundData:
    """Where a sound lives and how it should be played."""

    sound_path: Union[str, os.PathLike] = ""
    sound_type: SoundType = SoundType.VFX
    position: Vec3 = (0.0, 0.0, 0.0)
    is_3d: bool = True
    is_looping: bool = False
    is_stream: bool = False
    volume: float = 1.0

    def __post_init__(self) -> None:
        self.sound_path = os.fspath(self.sound_path)

    def describe(self) -> str:
        """A multi-line, human-readable summary of the sound."""
        x, y, z = self.position
        lines = [
            f"SoundPath: {self.sound_path}",
            f"Position: [{_format_number(x)}, {_format_number(y)}, {_format_number(z)}]",
            f"Volume: {_format_number(self.volume)}",
        ]
        flags = (
            ("Is 3D", self.is_3d),
            ("Is Looping", self.is_looping),
            ("Is Stream", self.is_stream),
        )
        lines.extend(f"{label}: {'Yes' if flag else 'No'}" for label, flag in flags)
        return "\n".join(lines) + "\n"