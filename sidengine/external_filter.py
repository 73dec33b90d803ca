"""The C64 audio output stage: a low-pass RC filter and a DC blocker."""

from __future__ import annotations


class ExternalFilter:
    """Two first-order filters in fixed point.

    A 16 kHz low-pass (10k, 1000pF) followed by a 1.6 Hz high-pass
    (10k, 10uF).
    """

    def __init__(self) -> None:
        self._vlp = 0
        self._vhp = 0
        self._w0lp_1_s7 = 0
        self._w0hp_1_s17 = 0

    def clock(self, value: int) -> int:
        """Feed one sample and return the filtered output."""
        vi = (value << 11) - (1 << (11 + 15))
        dvlp = (self._w0lp_1_s7 * (vi - self._vlp)) >> 7
        dvhp = (self._w0hp_1_s17 * (self._vlp - self._vhp)) >> 17
        self._vlp += dvlp
        self._vhp += dvhp
        return (self._vlp - self._vhp) >> 11

    def set_clock_frequency(self, frequency: float) -> None:
        """Compute coefficients for the given system clock frequency."""
        if frequency <= 0:
            raise ValueError("clock frequency must be positive")
        dt = 1.0 / frequency
        self._w0lp_1_s7 = int((dt / (dt + 10e3 * 1000e-12)) * (1 << 7) + 0.5)
        self._w0hp_1_s17 = int((dt / (dt + 10e3 * 10e-6)) * (1 << 17) + 0.5)

    def reset(self) -> None:
        """Clear the filter state."""
        self._vlp = 0
        self._vhp = 0