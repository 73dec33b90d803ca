"""Information about a loaded tune."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class Clock(IntEnum):
    """Video clock the tune was written for."""

    UNKNOWN = 0
    PAL = 1
    NTSC = 2
    ANY = 3


class Model(IntEnum):
    """SID model the tune was written for."""

    UNKNOWN = 0
    MOS6581 = 1
    MOS8580 = 2
    ANY = 3


class Compatibility(IntEnum):
    """Environment the tune needs."""

    C64 = 0
    PSID = 1
    R64 = 2
    BASIC = 3


class Speed(IntEnum):
    """How the play routine is timed."""

    VBI = 0
    CIA_1A = 60


@dataclass
class SidTuneInfo:
    """Tune metadata, partly taken from the file and partly derived."""

    format_string: str = "N/A"
    songs: int = 0
    start_song: int = 0
    current_song: int = 0
    song_speed: Speed = Speed.VBI
    clock_speed: Clock = Clock.UNKNOWN
    compatibility: Compatibility = Compatibility.C64
    data_file_len: int = 0
    c64data_len: int = 0
    load_addr: int = 0
    init_addr: int = 0
    play_addr: int = 0
    reloc_start_page: int = 0
    reloc_pages: int = 0
    path: str = ""
    data_file_name: str = ""
    info_file_name: str | None = None
    sid_models: list[Model] = field(default_factory=lambda: [Model.UNKNOWN])
    sid_chip_addresses: list[int] = field(default_factory=lambda: [0xD400])
    info_strings: list[str] = field(default_factory=list)
    comment_strings: list[str] = field(default_factory=list)
    fix_load: bool = False

    def sid_chip_base(self, index: int) -> int:
        """Base address of SID chip ``index``, or 0 if there is none."""
        if 0 <= index < len(self.sid_chip_addresses):
            return self.sid_chip_addresses[index]
        return 0

    def sid_chips(self) -> int:
        """Number of SID chips the tune uses."""
        return len(self.sid_chip_addresses)

    def sid_model(self, index: int) -> Model:
        """Model of SID chip ``index``, or UNKNOWN if there is none."""
        if 0 <= index < len(self.sid_models):
            return self.sid_models[index]
        return Model.UNKNOWN

    def info_string(self, index: int) -> str:
        """Info string ``index`` (name, author, released), or ""."""
        if 0 <= index < len(self.info_strings):
            return self.info_strings[index]
        return ""

    def comment_string(self, index: int) -> str:
        """Comment string ``index``, or ""."""
        if 0 <= index < len(self.comment_strings):
            return self.comment_strings[index]
        return ""