"""Memory and I/O banks of the emulated machine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol

from .endian import get_16hi8, get_16lo8

# 6502 opcodes used when patching ROMs.
_PHA = 0x48
_TXA = 0x8A
_TYA = 0x98
_JMP_INDIRECT = 0x6C
_JMP_ABSOLUTE = 0x4C
_LDA_IMMEDIATE = 0xA9
_STA_ABSOLUTE = 0x8D
_JSR_ABSOLUTE = 0x20


class Bank(ABC):
    """A region of the address space that can be read and written."""

    @abstractmethod
    def peek(self, address: int) -> int:
        """Read the byte at ``address``."""

    @abstractmethod
    def poke(self, address: int, value: int) -> None:
        """Write ``value`` at ``address``."""


class Pla(ABC):
    """The PLA functions banks depend on."""

    @abstractmethod
    def set_cpu_port(self, state: int) -> None:
        """Update the memory configuration from the CPU port bits."""

    @abstractmethod
    def last_read_byte(self) -> int:
        """Return the value last left on the data bus."""

    @abstractmethod
    def phi2_time(self) -> int:
        """Return the current PHI2 clock."""


class SidChip(Protocol):
    """What the SID banks need from a SID emulation."""

    def reset(self, volume: int) -> None: ...

    def peek(self, address: int) -> int: ...

    def poke(self, address: int, value: int) -> None: ...


class ColorRAMBank(Bank):
    """1K x 4-bit colour RAM at $D800-$DBFF."""

    def __init__(self) -> None:
        self.ram = bytearray(0x400)

    def reset(self) -> None:
        """Clear the colour RAM."""
        self.ram[:] = bytes(0x400)

    def peek(self, address: int) -> int:
        return self.ram[address & 0x3FF]

    def poke(self, address: int, value: int) -> None:
        self.ram[address & 0x3FF] = value & 0x0F


class DisconnectedBusBank(Bank):
    """The unconnected I/O areas at $DE00-$DFFF."""

    def __init__(self, pla: Pla) -> None:
        self._pla = pla

    def peek(self, address: int) -> int:
        """Return what was last left on the bus."""
        return self._pla.last_read_byte()

    def poke(self, address: int, value: int) -> None:
        """No device is connected, so writes are ignored."""


class ExtraSidBank(Bank):
    """Maps extra SID chips into a 256-byte page, one slot per 32 bytes."""

    _MAPPER_SIZE = 256 // 32

    def __init__(self) -> None:
        self._mapper: list[Bank | SidChip | None] = [None] * self._MAPPER_SIZE
        self._sids: list[SidChip] = []

    def reset(self) -> None:
        """Reset every attached SID."""
        for sid in self._sids:
            sid.reset(0xF)

    def reset_sid_mapper(self, bank: Bank) -> None:
        """Map every slot to ``bank``."""
        self._mapper = [bank] * self._MAPPER_SIZE

    def _target(self, address: int) -> Bank | SidChip:
        target = self._mapper[(address >> 5) & (self._MAPPER_SIZE - 1)]
        if target is None:
            raise LookupError(f"no bank mapped at ${address & 0xFFFF:04X}")
        return target

    def peek(self, address: int) -> int:
        return self._target(address).peek(address)

    def poke(self, address: int, value: int) -> None:
        self._target(address).poke(address, value)

    def add_sid(self, sid: SidChip, address: int) -> None:
        """Attach ``sid`` at the slot that holds ``address``."""
        self._sids.append(sid)
        self._mapper[(address >> 5) & (self._MAPPER_SIZE - 1)] = sid


class IOBank(Bank):
    """The 4K I/O region, split into sixteen 256-byte banks."""

    def __init__(self) -> None:
        self._map: list[Bank | None] = [None] * 16

    def set_bank(self, num: int, bank: Bank) -> None:
        """Install ``bank`` in slot ``num``."""
        self._map[num] = bank

    def get_bank(self, num: int) -> Bank | None:
        """Return the bank in slot ``num``."""
        return self._map[num]

    def _target(self, address: int) -> Bank:
        bank = self._map[(address >> 8) & 0xF]
        if bank is None:
            raise LookupError(f"no bank mapped at ${address & 0xFFFF:04X}")
        return bank

    def peek(self, address: int) -> int:
        return self._target(address).peek(address)

    def poke(self, address: int, value: int) -> None:
        self._target(address).poke(address, value)


class SidBank(Bank):
    """The main SID at $D400-$D7FF."""

    def __init__(self) -> None:
        self._sid: SidChip | None = None

    def _chip(self) -> SidChip:
        if self._sid is None:
            raise LookupError("no SID attached")
        return self._sid

    def reset(self) -> None:
        """Reset the attached SID."""
        self._chip().reset(0xF)

    def peek(self, address: int) -> int:
        return self._chip().peek(address)

    def poke(self, address: int, value: int) -> None:
        self._chip().poke(address, value)

    def set_sid(self, sid: SidChip | None) -> None:
        """Attach a SID emulation, or None to remove it."""
        self._sid = sid


class SystemRAMBank(Bank):
    """The full 64K of system RAM."""

    def __init__(self) -> None:
        self.ram = bytearray(0x10000)

    def reset(self) -> None:
        """Fill RAM with the power-up pattern."""
        block = bytearray()
        for first in (0x00, 0xFF, 0x00, 0xFF):
            other = first ^ 0xFF
            row = bytes((first, first, other, other, other, other, first, first))
            block += row * (0x4000 // 8)
        self.ram[:] = block

    def peek(self, address: int) -> int:
        return self.ram[address & 0xFFFF]

    def poke(self, address: int, value: int) -> None:
        self.ram[address & 0xFFFF] = value & 0xFF


class RomBank(Bank):
    """A read-only bank whose size is a power of two."""

    size = 0

    def __init__(self, size: int | None = None) -> None:
        if size is not None:
            self.size = size
        if self.size <= 0 or self.size & (self.size - 1):
            raise ValueError("ROM size must be a power of two")
        self._mask = self.size - 1
        self.rom = bytearray(self.size)

    def _set_val(self, address: int, value: int) -> None:
        self.rom[address & self._mask] = value & 0xFF

    def _get_val(self, address: int) -> int:
        return self.rom[address & self._mask]

    def _get_block(self, address: int, length: int) -> bytes:
        start = address & self._mask
        return bytes(self.rom[start:start + length])

    def _set_block(self, address: int, data: bytes) -> None:
        start = address & self._mask
        self.rom[start:start + len(data)] = data

    def set(self, source: bytes | None) -> None:
        """Copy the ROM image from ``source``; None leaves content as is."""
        if source is None:
            return
        if len(source) < self.size:
            raise ValueError(
                f"ROM image needs {self.size} bytes, got {len(source)}"
            )
        self.rom[:] = source[:self.size]

    def peek(self, address: int) -> int:
        return self.rom[address & self._mask]

    def poke(self, address: int, value: int) -> None:
        """Writing to ROM has no effect."""


class KernalRomBank(RomBank):
    """KERNAL ROM at $E000-$FFFF."""

    size = 0x2000

    def __init__(self) -> None:
        super().__init__()
        self._reset_vector = (0, 0)

    def set(self, source: bytes | None) -> None:
        """Load the image, or install a minimal stub when ``source`` is None."""
        super().set(source)
        if source is None:
            # IRQ entry point: save registers and jump through $0314
            for offset, byte in enumerate(
                (_PHA, _TXA, _PHA, _TYA, _PHA, _JMP_INDIRECT, 0x14, 0x03)
            ):
                self._set_val(0xFFA0 + offset, byte)
            # Halt
            self._set_val(0xEA39, 0x02)
            # Hardware vectors: NMI, RESET, IRQ/BRK
            for offset, byte in enumerate((0x39, 0xEA, 0x39, 0xEA, 0xA0, 0xFF)):
                self._set_val(0xFFFA + offset, byte)
        self._reset_vector = (self._get_val(0xFFFC), self._get_val(0xFFFD))

    def reset(self) -> None:
        """Restore the original RESET vector."""
        lo, hi = self._reset_vector
        self._set_val(0xFFFC, lo)
        self._set_val(0xFFFD, hi)

    def install_reset_hook(self, addr: int) -> None:
        """Point the RESET vector at ``addr``."""
        self._set_val(0xFFFC, get_16lo8(addr))
        self._set_val(0xFFFD, get_16hi8(addr))


class BasicRomBank(RomBank):
    """BASIC ROM at $A000-$BFFF."""

    size = 0x2000

    _TRAP_ADDR = 0xA7AE
    _SUBTUNE_ADDR = 0xBF53

    def __init__(self) -> None:
        super().__init__()
        self._trap = bytes(3)
        self._subtune = bytes(11)

    def set(self, source: bytes | None) -> None:
        """Load the image and back up the areas later patched."""
        super().set(source)
        self._trap = self._get_block(self._TRAP_ADDR, 3)
        self._subtune = self._get_block(self._SUBTUNE_ADDR, 11)

    def reset(self) -> None:
        """Restore the patched areas."""
        self._set_block(self._TRAP_ADDR, self._trap)
        self._set_block(self._SUBTUNE_ADDR, self._subtune)

    def install_trap(self, addr: int) -> None:
        """Make the BASIC warm start jump to ``addr``."""
        self._set_val(0xA7AE, _JMP_ABSOLUTE)
        self._set_val(0xA7AF, get_16lo8(addr))
        self._set_val(0xA7B0, get_16hi8(addr))

    def set_subtune(self, tune: int) -> None:
        """Patch in code that stores ``tune`` and runs the program."""
        code = (
            _LDA_IMMEDIATE, tune & 0xFF,
            _STA_ABSOLUTE, 0x0C, 0x03,
            _JSR_ABSOLUTE, 0x2C, 0xA8,
            _JMP_ABSOLUTE, 0xB1, 0xA7,
        )
        self._set_block(self._SUBTUNE_ADDR, bytes(code))


class CharacterRomBank(RomBank):
    """Character generator ROM at $D000-$DFFF."""

    size = 0x1000