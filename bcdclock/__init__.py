"""BCD alarm clock, multiplexed seven-segment screen and digital I/O models."""

__version__ = "0.1.0"
__all__ = ["clock", "screen", "digital"]