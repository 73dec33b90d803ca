"""Emulator settings passed to and from the player."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar


class Playback(IntEnum):
    """Number of output channels."""

    MONO = 1
    STEREO = 2


class SidModel(IntEnum):
    """SID chip model."""

    MOS6581 = 0
    MOS8580 = 1


class CiaModel(IntEnum):
    """CIA chip model."""

    MOS6526 = 0
    MOS8521 = 1
    MOS6526W4485 = 2


class C64Model(IntEnum):
    """C64 video standard / board model."""

    PAL = 0
    NTSC = 1
    OLD_NTSC = 2
    DREAN = 3
    PAL_M = 4


@dataclass
class SidConfig:
    """Emulator settings."""

    MAX_POWER_ON_DELAY: ClassVar[int] = 0x1FFF
    DEFAULT_SAMPLING_FREQ: ClassVar[int] = 44100

    default_c64_model: C64Model = C64Model.PAL
    force_c64_model: bool = False
    default_sid_model: SidModel = SidModel.MOS6581
    force_sid_model: bool = False
    cia_model: CiaModel = CiaModel.MOS6526
    playback: Playback = Playback.MONO
    frequency: int = DEFAULT_SAMPLING_FREQ
    second_sid_address: int = 0
    third_sid_address: int = 0

    def compare(self, other: SidConfig) -> bool:
        """Return True when the two configurations differ."""
        return self != other