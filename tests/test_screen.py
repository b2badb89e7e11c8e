import pytest

from bcdclock.screen import IMAGES, SCREEN_MAX_DIGITS, Screen, ScreenDriver, Segment


class RecordingDriver(ScreenDriver):
    def __init__(self):
        self.calls = []

    def digits_turn_off(self):
        self.calls.append(("off",))

    def segments_update(self, segments):
        self.calls.append(("segments", segments))

    def digit_turn_on(self, digit):
        self.calls.append(("on", digit))

    def lit(self):
        """Pairs of (digit, segments) in the order they were shown."""
        shown = []
        pending = None
        for call in self.calls:
            if call[0] == "segments":
                pending = call[1]
            elif call[0] == "on":
                shown.append((call[1], pending))
        return shown


@pytest.fixture
def driver():
    return RecordingDriver()


def test_segment_bits(driver):
    screen = Screen(1, driver)
    screen.write_bcd([8])
    screen.refresh()
    assert driver.lit() == [(0, 0b0111_1111)]
    assert Segment.A == 1
    assert Segment.P == 1 << 7


def test_images_follow_segment_layout(driver):
    screen = Screen(4, driver)
    screen.write_bcd([1, 7, 8, 0])
    assert screen.images == (
        Segment.B | Segment.C,
        Segment.A | Segment.B | Segment.C,
        Segment.A | Segment.B | Segment.C | Segment.D | Segment.E | Segment.F | Segment.G,
        Segment.A | Segment.B | Segment.C | Segment.D | Segment.E | Segment.F,
    )


def test_images_never_light_decimal_point(driver):
    screen = Screen(1, driver)
    for digit in range(10):
        screen.write_bcd([digit])
        screen.refresh()
    shown = [segments for _, segments in driver.lit()]
    assert shown == list(IMAGES)
    assert [segments & Segment.P for segments in shown] == [0] * 10


def test_driver_is_abstract():
    with pytest.raises(TypeError):
        ScreenDriver()


def test_digit_count_is_clamped(driver):
    screen = Screen(12, driver)
    assert screen.digits == SCREEN_MAX_DIGITS


def test_zero_digits_rejected(driver):
    with pytest.raises(ValueError):
        Screen(0, driver)


def test_write_bcd_stores_images(driver):
    screen = Screen(4, driver)
    screen.write_bcd([1, 2, 3, 4])
    assert screen.images == (IMAGES[1], IMAGES[2], IMAGES[3], IMAGES[4])


def test_write_bcd_truncates_to_digit_count(driver):
    screen = Screen(2, driver)
    screen.write_bcd([5, 6, 7])
    assert screen.images == (IMAGES[5], IMAGES[6])


def test_write_bcd_clears_previous_value(driver):
    screen = Screen(4, driver)
    screen.write_bcd([8, 8, 8, 8])
    screen.write_bcd([1])
    assert screen.images == (IMAGES[1], 0, 0, 0)


def test_write_bcd_rejects_non_decimal(driver):
    screen = Screen(4, driver)
    with pytest.raises(ValueError):
        screen.write_bcd([1, 10])


def test_refresh_sequence_of_calls(driver):
    screen = Screen(4, driver)
    screen.write_bcd([1, 2, 3, 4])
    screen.refresh()
    assert driver.calls == [("off",), ("segments", IMAGES[2]), ("on", 1)]


def test_refresh_cycles_through_digits(driver):
    screen = Screen(4, driver)
    screen.write_bcd([1, 2, 3, 4])
    for _ in range(4):
        screen.refresh()
    assert driver.lit() == [
        (1, IMAGES[2]),
        (2, IMAGES[3]),
        (3, IMAGES[4]),
        (0, IMAGES[1]),
    ]


def test_refresh_wraps_on_clamped_screen(driver):
    screen = Screen(12, driver)
    for _ in range(SCREEN_MAX_DIGITS):
        screen.refresh()
    assert [digit for digit, _ in driver.lit()] == [1, 2, 3, 4, 5, 6, 7, 0]


def test_flashing_blanks_selected_digits(driver):
    screen = Screen(4, driver)
    screen.write_bcd([1, 2, 3, 4])
    screen.flash_digits(0, 1, 1)
    for _ in range(8):
        screen.refresh()
    assert driver.lit() == [
        (1, IMAGES[2]),
        (2, IMAGES[3]),
        (3, IMAGES[4]),
        (0, 0),
        (1, 0),
        (2, IMAGES[3]),
        (3, IMAGES[4]),
        (0, IMAGES[1]),
    ]


def test_flashing_off_with_zero_divisor(driver):
    screen = Screen(4, driver)
    screen.write_bcd([1, 2, 3, 4])
    screen.flash_digits(0, 3, 0)
    for _ in range(8):
        screen.refresh()
    assert driver.lit() == [
        (1, IMAGES[2]),
        (2, IMAGES[3]),
        (3, IMAGES[4]),
        (0, IMAGES[1]),
    ] * 2


def test_flashing_never_touches_other_digits(driver):
    screen = Screen(4, driver)
    screen.write_bcd([1, 2, 3, 4])
    screen.flash_digits(2, 3, 1)
    for _ in range(16):
        screen.refresh()
    for digit, segments in driver.lit():
        if digit in (0, 1):
            assert segments == screen.images[digit]


@pytest.mark.parametrize("from_, to", [(2, 1), (0, SCREEN_MAX_DIGITS), (SCREEN_MAX_DIGITS, SCREEN_MAX_DIGITS)])
def test_flash_digits_rejects_bad_range(driver, from_, to):
    screen = Screen(4, driver)
    with pytest.raises(ValueError):
        screen.flash_digits(from_, to, 1)


def test_bad_flash_range_keeps_previous_setting(driver):
    screen = Screen(4, driver)
    screen.write_bcd([1, 2, 3, 4])
    with pytest.raises(ValueError):
        screen.flash_digits(3, 0, 1)
    for _ in range(8):
        screen.refresh()
    assert all(segments == screen.images[digit] for digit, segments in driver.lit())