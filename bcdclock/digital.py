"""Digital inputs and outputs on general-purpose I/O pins."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum

_BYTE_MASK = 0xFF


class DigitalState(IntEnum):
    """Change seen on a digital input since it was last read."""

    WAS_DEACTIVATED = -1
    NO_CHANGE = 0
    WAS_ACTIVATED = 1


def _check_pin(gpio: int, bit: int) -> None:
    if not 0 <= gpio <= _BYTE_MASK:
        raise ValueError(f"gpio port out of range: {gpio}")
    if not 0 <= bit <= _BYTE_MASK:
        raise ValueError(f"gpio bit out of range: {bit}")


class GpioPort(ABC):
    """Pin-level access to a bank of general-purpose I/O ports."""

    @abstractmethod
    def set_pin_state(self, gpio: int, bit: int, state: bool) -> None:
        """Drive a pin high (True) or low (False)."""

    @abstractmethod
    def set_pin_direction(self, gpio: int, bit: int, output: bool) -> None:
        """Configure a pin as an output (True) or an input (False)."""

    @abstractmethod
    def toggle_pin(self, gpio: int, bit: int) -> None:
        """Invert the level of a pin."""

    @abstractmethod
    def read_pin(self, gpio: int, bit: int) -> bool:
        """Return the level of a pin: True for high."""


class MemoryGpioPort(GpioPort):
    """A GPIO port kept in memory; every pin starts low and as an input."""

    def __init__(self) -> None:
        self._levels: dict[tuple[int, int], bool] = {}
        self._outputs: set[tuple[int, int]] = set()

    def set_pin_state(self, gpio: int, bit: int, state: bool) -> None:
        _check_pin(gpio, bit)
        self._levels[(gpio, bit)] = bool(state)

    def set_pin_direction(self, gpio: int, bit: int, output: bool) -> None:
        _check_pin(gpio, bit)
        if output:
            self._outputs.add((gpio, bit))
        else:
            self._outputs.discard((gpio, bit))

    def toggle_pin(self, gpio: int, bit: int) -> None:
        _check_pin(gpio, bit)
        self._levels[(gpio, bit)] = not self._levels.get((gpio, bit), False)

    def read_pin(self, gpio: int, bit: int) -> bool:
        _check_pin(gpio, bit)
        return self._levels.get((gpio, bit), False)

    def is_output(self, gpio: int, bit: int) -> bool:
        """Report whether a pin is configured as an output."""
        _check_pin(gpio, bit)
        return (gpio, bit) in self._outputs


class DigitalOutput:
    """A single output pin that can be switched on, off or toggled."""

    def __init__(self, port: GpioPort, gpio: int, bit: int) -> None:
        _check_pin(gpio, bit)
        self._port = port
        self._gpio = gpio
        self._bit = bit

    def activate(self) -> None:
        """Drive the pin high."""
        self._port.set_pin_state(self._gpio, self._bit, True)

    def deactivate(self) -> None:
        """Drive the pin low."""
        self._port.set_pin_state(self._gpio, self._bit, False)

    def toggle(self) -> None:
        """Invert the pin."""
        self._port.toggle_pin(self._gpio, self._bit)


class DigitalInput:
    """A single input pin, active when low unless ``inverted`` is set."""

    def __init__(self, port: GpioPort, gpio: int, bit: int, inverted: bool) -> None:
        _check_pin(gpio, bit)
        self._port = port
        self._gpio = gpio
        self._bit = bit
        self._inverted = bool(inverted)
        self._last_state = False
        port.set_pin_direction(gpio, bit, False)

    def is_active(self) -> bool:
        """Report whether the input is active now."""
        state = not self._port.read_pin(self._gpio, self._bit)
        return not state if self._inverted else state

    def was_changed(self) -> DigitalState:
        """Report the change since the previous check and remember the new state."""
        state = self.is_active()
        if state and not self._last_state:
            result = DigitalState.WAS_ACTIVATED
        elif not state and self._last_state:
            result = DigitalState.WAS_DEACTIVATED
        else:
            result = DigitalState.NO_CHANGE
        self._last_state = state
        return result

    def was_activated(self) -> bool:
        """Report whether the input went active since the previous check."""
        return self.was_changed() is DigitalState.WAS_ACTIVATED

    def was_deactivated(self) -> bool:
        """Report whether the input went inactive since the previous check."""
        return self.was_changed() is DigitalState.WAS_DEACTIVATED