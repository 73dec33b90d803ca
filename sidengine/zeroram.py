"""The zero page bank, including the CPU data port at $00/$01."""

from __future__ import annotations

from .banks import Bank, Pla, SystemRAMBank

# Cycles after which a floating, unused port bit drops back to 0 (6510 value).
CPU6510_DATA_PORT_FALL_OFF_CYCLES = 350_000
# Same for the 8500; kept for reference, not currently used.
CPU8500_DATA_PORT_FALL_OFF_CYCLES = 1_500_000


class DataBit:
    """An unused data port bit that holds its charge for a while.

    When written as output and then left floating, the bit keeps its value
    until the fall-off time has passed, then reads as 0.
    """

    def __init__(self, bit: int) -> None:
        self.bit = bit
        self._data_set_clk = 0
        self._is_falling_off = False
        self._data_set = 0

    def reset(self) -> None:
        """Discharge the bit."""
        self._is_falling_off = False
        self._data_set = 0

    def read_bit(self, phi2time: int) -> int:
        """Return the bit's value (already shifted into place) at ``phi2time``."""
        if self._is_falling_off and self._data_set_clk < phi2time:
            self.reset()
        return self._data_set

    def write_bit(self, phi2time: int, value: int) -> None:
        """Charge the bit from ``value`` and start the fall-off timer."""
        self._data_set_clk = phi2time + CPU6510_DATA_PORT_FALL_OFF_CYCLES
        self._data_set = value & (1 << self.bit)
        self._is_falling_off = True


class ZeroRAMBank(Bank):
    """RAM for the first 4K, with the CPU port mapped at addresses 0 and 1."""

    def __init__(self, pla: Pla, ram_bank: SystemRAMBank) -> None:
        self._pla = pla
        self._ram_bank = ram_bank
        self._data_bit6 = DataBit(6)
        self._data_bit7 = DataBit(7)
        self._dir = 0
        self._data = 0x3F
        self._data_read = 0x3F
        self._proc_port_pins = 0x3F

    def _update_cpu_port(self) -> None:
        # Pins whose direction is output follow the data register.
        self._proc_port_pins = (
            (self._proc_port_pins & ~self._dir) | (self._data & self._dir)
        ) & 0xFF
        not_dir = ~self._dir & 0xFF
        self._data_read = (self._data | not_dir) & (self._proc_port_pins | 0x17)
        self._pla.set_cpu_port((self._data | not_dir) & 0x07)
        if not self._dir & 0x20:
            self._data_read &= ~0x20 & 0xFF

    def reset(self) -> None:
        """Return the port to its power-up state."""
        self._data_bit6.reset()
        self._data_bit7.reset()
        self._dir = 0
        self._data = 0x3F
        self._data_read = 0x3F
        self._proc_port_pins = 0x3F
        self._update_cpu_port()

    def peek(self, address: int) -> int:
        if address == 0:
            return self._dir
        if address == 1:
            value = self._data_read
            # Unused bits in input mode read what the "capacitor" holds.
            if not self._dir & 0x40:
                value = (value & ~0x40) | self._data_bit6.read_bit(
                    self._pla.phi2_time()
                )
            if not self._dir & 0x80:
                value = (value & ~0x80) | self._data_bit7.read_bit(
                    self._pla.phi2_time()
                )
            return value & 0xFF
        return self._ram_bank.peek(address)

    def poke(self, address: int, value: int) -> None:
        value &= 0xFF
        if address == 0:
            if self._dir != value:
                # Switching an unused bit from output to input leaves charge.
                if self._dir & 0x40 and not value & 0x40:
                    self._data_bit6.write_bit(self._pla.phi2_time(), self._data)
                if self._dir & 0x80 and not value & 0x80:
                    self._data_bit7.write_bit(self._pla.phi2_time(), self._data)
                self._dir = value
                self._update_cpu_port()
            value = self._pla.last_read_byte()
        elif address == 1:
            if self._dir & 0x40:
                self._data_bit6.write_bit(self._pla.phi2_time(), value)
            if self._dir & 0x80:
                self._data_bit7.write_bit(self._pla.phi2_time(), value)
            if self._data != value:
                self._data = value
                self._update_cpu_port()
            value = self._pla.last_read_byte()
        self._ram_bank.poke(address, value)