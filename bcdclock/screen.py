"""Multiplexed seven-segment screen with optional digit flashing."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntFlag
from typing import Iterable

SCREEN_MAX_DIGITS = 8
_BYTE_MASK = 0xFF
_UINT16_MAX = 0xFFFF


class Segment(IntFlag):
    """Bit assigned to each segment of a digit, plus the decimal point."""

    A = 1 << 0
    B = 1 << 1
    C = 1 << 2
    D = 1 << 3
    E = 1 << 4
    F = 1 << 5
    G = 1 << 6
    P = 1 << 7


IMAGES: tuple[int, ...] = (
    int(Segment.A | Segment.B | Segment.C | Segment.D | Segment.E | Segment.F),  # 0
    int(Segment.B | Segment.C),  # 1
    int(Segment.A | Segment.B | Segment.D | Segment.E | Segment.G),  # 2
    int(Segment.A | Segment.B | Segment.C | Segment.D | Segment.G),  # 3
    int(Segment.B | Segment.C | Segment.F | Segment.G),  # 4
    int(Segment.A | Segment.C | Segment.D | Segment.F | Segment.G),  # 5
    int(Segment.A | Segment.C | Segment.D | Segment.E | Segment.F | Segment.G),  # 6
    int(Segment.A | Segment.B | Segment.C),  # 7
    int(
        Segment.A | Segment.B | Segment.C | Segment.D | Segment.E | Segment.F | Segment.G
    ),  # 8
    int(Segment.A | Segment.B | Segment.C | Segment.D | Segment.F | Segment.G),  # 9
)


class ScreenDriver(ABC):
    """Low-level operations a screen needs from the hardware it drives."""

    @abstractmethod
    def digits_turn_off(self) -> None:
        """Switch off every digit and every segment."""

    @abstractmethod
    def segments_update(self, segments: int) -> None:
        """Light the segments given as a bit mask of Segment values."""

    @abstractmethod
    def digit_turn_on(self, digit: int) -> None:
        """Enable the digit at the given position."""


class Screen:
    """A screen of up to eight digits, refreshed one digit at a time."""

    def __init__(self, digits: int, driver: ScreenDriver) -> None:
        if not 1 <= digits <= _BYTE_MASK:
            raise ValueError(f"digit count out of range: {digits}")
        self._digits = min(digits, SCREEN_MAX_DIGITS)
        self._driver = driver
        self._current_digit = 0
        self._flashing_from = 0
        self._flashing_to = 0
        self._flashing_count = 0
        self._flashing_frequency = 0
        self._value = [0] * SCREEN_MAX_DIGITS

    @property
    def digits(self) -> int:
        """Number of digits the screen drives."""
        return self._digits

    @property
    def images(self) -> tuple[int, ...]:
        """Segment masks held for each digit position."""
        return tuple(self._value[: self._digits])

    def write_bcd(self, value: Iterable[int]) -> None:
        """Show decimal digits, one per position; extra digits are dropped."""
        digits = list(value)[: self._digits]
        for digit in digits:
            if not 0 <= digit <= 9:
                raise ValueError(f"not a decimal digit: {digit}")
        self._value = [IMAGES[digit] for digit in digits]
        self._value += [0] * (SCREEN_MAX_DIGITS - len(self._value))

    def refresh(self) -> None:
        """Move on to the next digit and light it."""
        self._driver.digits_turn_off()
        self._current_digit = (self._current_digit + 1) % self._digits
        segments = self._value[self._current_digit]
        if self._flashing_frequency:
            if self._current_digit == 0:
                self._flashing_count = (
                    (self._flashing_count + 1) % self._flashing_frequency
                ) & _BYTE_MASK
            if (
                self._flashing_count >= self._flashing_frequency // 2
                and self._flashing_from <= self._current_digit <= self._flashing_to
            ):
                segments = 0
        self._driver.segments_update(segments)
        self._driver.digit_turn_on(self._current_digit)

    def flash_digits(self, from_: int, to: int, divisor: int) -> None:
        """Blink digits ``from_`` to ``to``; a divisor of zero stops blinking."""
        if from_ > to or from_ >= SCREEN_MAX_DIGITS or to >= SCREEN_MAX_DIGITS:
            raise ValueError(f"invalid flashing range: {from_}..{to}")
        if from_ < 0:
            raise ValueError(f"invalid flashing range: {from_}..{to}")
        if not 0 <= divisor <= _UINT16_MAX:
            raise ValueError(f"flashing divisor out of range: {divisor}")
        self._flashing_from = from_
        self._flashing_to = to
        self._flashing_frequency = (2 * divisor) & _UINT16_MAX
        self._flashing_count = 0