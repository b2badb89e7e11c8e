"""Real-time clock that counts in binary-coded decimal, with an alarm."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

_DIGIT_COUNT = 6
_BYTE_MASK = 0xFF
_UINT16_MAX = 0xFFFF


class ClockNotSetError(RuntimeError):
    """Raised when the time of a clock is read before it was ever set."""


@dataclass(frozen=True)
class ClockTime:
    """A time of day held as six BCD digits.

    The digits are ordered from least to most significant: seconds units,
    seconds tens, minutes units, minutes tens, hours units, hours tens.
    """

    digits: tuple[int, ...] = (0,) * _DIGIT_COUNT

    def __post_init__(self) -> None:
        digits = tuple(self.digits)
        if len(digits) != _DIGIT_COUNT:
            raise ValueError(f"a clock time has {_DIGIT_COUNT} digits, got {len(digits)}")
        for digit in digits:
            if not isinstance(digit, int) or isinstance(digit, bool):
                raise TypeError(f"BCD digits must be integers, got {digit!r}")
            if not 0 <= digit <= _BYTE_MASK:
                raise ValueError(f"BCD digit out of byte range: {digit}")
        object.__setattr__(self, "digits", digits)

    @classmethod
    def from_bcd(cls, digits: Iterable[int]) -> "ClockTime":
        """Build a time from six digits, least significant first."""
        return cls(tuple(digits))

    def to_bcd(self) -> list[int]:
        """Return the six digits, least significant first."""
        return list(self.digits)

    def __str__(self) -> str:
        s0, s1, m0, m1, h0, h1 = self.digits
        return f"{h1}{h0}:{m1}{m0}:{s1}{s0}"


def _carry(digits: list[int], position: int, limit: int) -> bool:
    """Increment one byte-wide digit; return True when it went past ``limit``."""
    digits[position] = (digits[position] + 1) & _BYTE_MASK
    if digits[position] > limit:
        digits[position] = 0
        return True
    return False


def _increment_hours(digits: list[int]) -> None:
    if _carry(digits, 4, 9):
        digits[5] = (digits[5] + 1) & _BYTE_MASK
        if digits[5] > 2 or (digits[5] == 2 and digits[4] > 3):
            digits[:] = [0] * _DIGIT_COUNT


def _increment_second(digits: list[int]) -> None:
    if _carry(digits, 0, 9) and _carry(digits, 1, 5):
        _increment_minute(digits)


def _increment_minute(digits: list[int]) -> None:
    if _carry(digits, 2, 9) and _carry(digits, 3, 5):
        _increment_hours(digits)


class Clock:
    """A clock advanced by ticks, with a single alarm that can be snoozed."""

    def __init__(self, ticks_per_second: int) -> None:
        if not 0 <= ticks_per_second <= _UINT16_MAX:
            raise ValueError(f"ticks per second out of range: {ticks_per_second}")
        self._ticks_per_second = ticks_per_second
        self._tick_count = 0
        self._current = [0] * _DIGIT_COUNT
        self._alarm = [0] * _DIGIT_COUNT
        self._valid = False
        self._alarm_enabled = False
        self._alarm_triggered = False

    def time_is_valid(self) -> bool:
        """Report whether the time is valid; this check always answers False."""
        return False

    def get_time(self) -> ClockTime:
        """Return the current time; raise ClockNotSetError if it was never set."""
        if not self._valid:
            raise ClockNotSetError("the clock time has not been set")
        return ClockTime.from_bcd(self._current)

    def set_time(self, new_time: ClockTime) -> None:
        """Set the current time and mark the clock as running."""
        if not isinstance(new_time, ClockTime):
            raise TypeError("new_time must be a ClockTime")
        self._current = new_time.to_bcd()
        self._valid = True

    def new_tick(self) -> None:
        """Count one tick, advancing a second once enough ticks have passed."""
        if not self._valid:
            return
        self._tick_count = (self._tick_count + 1) & _UINT16_MAX
        if self._tick_count >= self._ticks_per_second:
            self._tick_count = 0
            _increment_second(self._current)
            if self._alarm_enabled and self._current == self._alarm:
                self._alarm_triggered = True

    def set_alarm_time(self, alarm_time: ClockTime) -> None:
        """Set the time at which the alarm goes off."""
        if not isinstance(alarm_time, ClockTime):
            raise TypeError("alarm_time must be a ClockTime")
        self._alarm = alarm_time.to_bcd()

    def get_alarm_time(self) -> ClockTime:
        """Return the time at which the alarm goes off."""
        return ClockTime.from_bcd(self._alarm)

    def enable_alarm(self) -> None:
        """Arm the alarm and clear any earlier trigger."""
        self._alarm_enabled = True
        self._alarm_triggered = False

    def disable_alarm(self) -> None:
        """Disarm the alarm and clear any trigger."""
        self._alarm_enabled = False
        self._alarm_triggered = False

    def is_alarm_enabled(self) -> bool:
        """Report whether the alarm is armed."""
        return self._alarm_enabled

    def alarm_triggered(self) -> bool:
        """Report whether the alarm has gone off."""
        return self._alarm_triggered

    def snooze_alarm(self, minutes: int) -> None:
        """Clear the trigger and move the alarm time forward by whole minutes."""
        if not 0 <= minutes <= _BYTE_MASK:
            raise ValueError(f"snooze minutes out of range: {minutes}")
        self._alarm_triggered = False
        for _ in range(minutes):
            _increment_minute(self._alarm)