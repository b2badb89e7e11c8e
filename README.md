# bcdclock

Models of the pieces of a small alarm clock: a clock that keeps time
in BCD digits, a driver-agnostic multiplexed seven-segment screen, and
digital inputs and outputs on a GPIO port.

## Install

```
pip install bcdclock
```

## Clock (`bcdclock.clock`)

`Clock(ticks_per_second)` counts ticks and advances its time by one
second every `ticks_per_second` ticks, rolling over from 23:59:59 to
00:00:00. Ticks are ignored until the time has been set with
`set_time()`; before that, `get_time()` raises `ClockNotSetError`.

Times are `ClockTime` values, six BCD digits ordered from the least
significant: units of seconds, tens of seconds, units of minutes, tens
of minutes, units of hours, tens of hours. `ClockTime.from_bcd()` builds
one from that order and `to_bcd()` gives the digits back; `str()` shows
`HH:MM:SS`.

The alarm fires when, after a second has passed, the current time equals
the alarm time while the alarm is enabled.

```python
from bcdclock.clock import Clock, ClockTime

clock = Clock(ticks_per_second=5)
clock.set_time(ClockTime.from_bcd([0, 0, 0, 0, 4, 1]))        # 14:00:00
clock.set_alarm_time(ClockTime.from_bcd([0, 0, 1, 0, 4, 1]))  # 14:01:00
clock.enable_alarm()

for _ in range(5 * 60):
    clock.new_tick()

clock.alarm_triggered()   # True
clock.snooze_alarm(5)     # trigger cleared, alarm moves to 14:06:00
```

Other members: `get_alarm_time()`, `disable_alarm()` (also clears the
trigger), `is_alarm_enabled()`. `time_is_valid()` always answers
`False`; use `get_time()` to find out whether the time has been set.

## Screen (`bcdclock.screen`)

`Screen(digits, driver)` keeps one segment image per digit (at most
`SCREEN_MAX_DIGITS`, eight; larger counts are clamped) and lights one
digit on every `refresh()`, through a `ScreenDriver` subclass you
provide. `write_bcd()` takes decimal digits and stores their images
from `IMAGES`; digits beyond the screen width are dropped and anything
outside 0–9 raises `ValueError`. The `digits` and `images` properties
show the width and the stored segment masks. Segment bits are named by
`Segment`.

`flash_digits(from_, to, divisor)` blanks positions `from_` to `to`
for half of every flashing period; a divisor of zero stops flashing.
An invalid range raises `ValueError`.

```python
from bcdclock.screen import Screen, ScreenDriver

class PrintingDriver(ScreenDriver):
    def digits_turn_off(self):
        pass

    def segments_update(self, segments):
        print(f"segments {segments:08b}")

    def digit_turn_on(self, digit):
        print(f"digit {digit}")

screen = Screen(4, PrintingDriver())
screen.write_bcd([1, 2, 3, 4])
screen.flash_digits(0, 1, 60)
screen.refresh()
```

## Digital inputs and outputs (`bcdclock.digital`)

`DigitalOutput(port, gpio, bit)` and `DigitalInput(port, gpio, bit,
inverted)` act on any `GpioPort`. `MemoryGpioPort` keeps pin levels and
directions in memory; every pin starts low and as an input, and
`is_output()` reports a pin's direction.

Inputs read active when the line is low, unless created inverted.
`was_changed()` returns a `DigitalState` (`WAS_ACTIVATED`,
`WAS_DEACTIVATED` or `NO_CHANGE`) relative to the previous check;
`was_activated()` and `was_deactivated()` are shortcuts for it.

```python
from bcdclock.digital import DigitalInput, DigitalOutput, MemoryGpioPort

port = MemoryGpioPort()
buzzer = DigitalOutput(port, 5, 2)
buzzer.activate()
port.read_pin(5, 2)               # True

key = DigitalInput(port, 5, 9, False)
port.set_pin_state(5, 9, False)   # key pressed pulls the line low
key.was_activated()               # True
key.was_changed()                 # DigitalState.NO_CHANGE
```

## What this package does not do

It drives no real hardware: there is no GPIO port or screen driver for
an actual board, no ready-made assembly of clock, screen, keys and
buzzer, and no command to run. Those are left to the code that uses
these classes, through `GpioPort` and `ScreenDriver`.