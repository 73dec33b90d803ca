"""Identify known ROM images by their MD5 checksum."""

from __future__ import annotations

import hashlib
from collections.abc import Mapping

UNKNOWN_ROM = "Unknown Rom"


class RomCheck:
    """Looks up a ROM image's description from its MD5 digest."""

    size = 0
    known: Mapping[str, str] = {}

    def __init__(
        self,
        rom: bytes,
        size: int | None = None,
        checksums: Mapping[str, str] | None = None,
    ) -> None:
        if size is not None:
            self.size = size
        if len(rom) < self.size:
            raise ValueError(f"ROM image needs {self.size} bytes, got {len(rom)}")
        self._rom = bytes(rom[: self.size])
        self._checksums = dict(self.known if checksums is None else checksums)

    def _checksum(self) -> str:
        return hashlib.md5(self._rom).hexdigest()

    def info(self) -> str:
        """Return the ROM description, or "Unknown Rom"."""
        return self._checksums.get(self._checksum(), UNKNOWN_ROM)


class KernalCheck(RomCheck):
    """Identifies KERNAL ROM images."""

    size = 0x2000
    known = {
        "1ae0ea224f2b291dafa2c20b990bb7d4": "C64 KERNAL first revision",
        "7360b296d64e18b88f6cf52289fd99a1": "C64 KERNAL second revision",
        "479553fd53346ec84054f0b1c6237397": "C64 KERNAL second revision (Japanese)",
        "39065497630802346bce17963f13c092": "C64 KERNAL third revision",
        "27e26dbb267c8ebf1cd47105a6ca71e7": "C64 KERNAL third revision (Swedish C2G007)",
        "e4aa56240fe13d8ad8d7d1dc8fec2395": "C64 KERNAL third revision (Danish)",
        "174546cf655e874546af4eac5f5bf61b": "C64 KERNAL third revision (Turkish)",
        "187b8c713b51931e070872bd390b472a": "Commodore SX-64 KERNAL",
        "b7b1a42e11ff8efab4e49afc4faedeee": "Commodore SX-64 KERNAL (Swedish)",
        "3abc938cac3d622e1a7041c15b928707": "Cockroach Turbo-ROM",
        "631ea2ca0dcda414a90aeefeaf77fe45": "Cockroach Turbo-ROM (SX-64)",
        "a9de1832e9be1a8c60f4f979df585681": "Datel DOS-ROM 1.2",
        "da43563f218b46ece925f221ef1f4bc2": "Datel Mercury 3 (NTSC)",
        "b7dc8ed82170c81773d4f5dc8069a000": "Datel Turbo ROM II (PAL)",
        "6b309c76473dcf555c52c598c6a51011": "Dolphin DOS v1.0",
        "c3c93b9a46f116acbfe7ee147c338c60": "Dolphin DOS v2.0-1 AU",
        "2a441f4abd272d50f94b43c7ff3cc629": "Dolphin DOS v2.0-1",
        "c7a175217e67dcb425feca5fcf2a01cc": "Dolphin DOS v2.0-2",
        "7a9b1040cfbe769525bb9cdc28427be6": "Dolphin DOS v2.0-3",
        "fc8fb5ec89b34ae41c8dc20907447e06": "Dolphin DOS v3.0",
        "9a6e1c4b99c6f65323aa96940c7eb7f7": "ExOS v3 fertig",
        "3241a4fcf2ba28ba3fc79826bc023814": "ExOS v3",
        "cffd2616312801da56bcc6728f0e39ca": "ExOS v4",
        "e6e2bb24a0fa414182b0fd149bde689d": "TurboAccess",
        "c5c5990f0826fcbd372901e761fab1b7": "TurboTrans v3.0-1",
        "042ffc11383849bdf0e600474cefaaaf": "TurboTrans v3.0-2",
        "9d62852013fc2c29c3111c765698664b": "Turbo-Process US",
        "f9c9838e8d6752dc6066a8c9e6c2e880": "Turbo-Process",
    }

    def __init__(self, kernal: bytes) -> None:
        super().__init__(kernal)


class BasicCheck(RomCheck):
    """Identifies BASIC ROM images."""

    size = 0x2000
    known = {"57af4ae21d4b705c2991d98ed5c1f7b8": "C64 BASIC V2"}

    def __init__(self, basic: bytes) -> None:
        super().__init__(basic)


class ChargenCheck(RomCheck):
    """Identifies character generator ROM images."""

    size = 0x1000
    known = {
        "12a4202f5331d45af846af6c58fba946": "C64 character generator",
        "cf32a93c0a693ed359a4f483ef6db53d": "C64 character generator (Japanese)",
        "7a1906cd3993ad17a0a0b2b68da9c114": "C64 character generator (Swedish)",
        "5973267e85b7b2b574e780874843180b": "C64 character generator (Swedish C2G007)",
        "81a1a8e6e334caeadd1b8468bb7728d3": "C64 character generator (Spanish)",
        "b3ad62b41b5f919fc56c3a40e636ec29": "C64 character generator (Danish)",
        "7d82b1f8f750665b5879c16b03c617d9": "C64 character generator (Turkish)",
    }

    def __init__(self, chargen: bytes) -> None:
        super().__init__(chargen)


__all__ = ["RomCheck", "KernalCheck", "BasicCheck", "ChargenCheck", "UNKNOWN_ROM"]