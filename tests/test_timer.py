import pytest

from cardtable.timer import Time


def fake_clock(*ticks):
    it = iter(ticks)
    return lambda: next(it)


def test_delta_is_difference_between_ticks():
    t = Time(fake_clock(10.0, 10.5, 11.25))
    t.initialize()
    t.update()
    assert t.delta_time == pytest.approx(0.5)
    t.update()
    assert t.delta_time == pytest.approx(0.75)


def test_no_title_within_first_second():
    titles = []
    t = Time(fake_clock(0.0, 0.5))
    t.initialize()
    t.update()
    assert t.render(titles.append) is None
    assert titles == []


def test_title_after_a_second():
    titles = []
    t = Time(fake_clock(0.0, 0.5, 1.0, 1.5))
    t.initialize()
    for _ in range(3):
        t.update()
        shown = t.render(titles.append)
    assert titles == ["FPS:2"]
    assert shown == "FPS:2"


def test_counter_resets_after_report():
    titles = []
    t = Time(fake_clock(0.0, 0.75, 1.5, 2.25))
    t.initialize()
    for _ in range(3):
        t.update()
        t.render(titles.append)
    assert len(titles) == 1
    assert titles[0].startswith("FPS:")


def test_exactly_one_second_does_not_report():
    titles = []
    t = Time(fake_clock(0.0, 1.0))
    t.initialize()
    t.update()
    t.render(titles.append)
    assert titles == []