"""Building blocks of a C64 SID player engine: scheduling, memory banks and tune metadata."""

__version__ = "2.12.0"