from pixelflap.effects import SetPrompt
from pixelflap.scheduler import Scheduler


def test_callbacks_fire_once_in_due_order():
    scheduler = Scheduler()
    fired = []
    scheduler.call_later(300, lambda: fired.append("late"))
    scheduler.call_later(100, lambda: fired.append("early"))

    scheduler.advance(99)
    assert fired == []
    scheduler.advance(250)
    assert fired == ["early", "late"]
    scheduler.advance(1000)
    assert fired == ["early", "late"]
    assert scheduler.pending == 0


def test_advance_collects_returned_effects():
    scheduler = Scheduler()
    scheduler.call_later(10, lambda: [SetPrompt("a")])
    scheduler.call_later(20, lambda: None)
    assert scheduler.advance(50) == [SetPrompt("a")]


def test_cancel_and_clear():
    scheduler = Scheduler()
    fired = []
    handle = scheduler.call_later(10, lambda: fired.append(1))
    scheduler.call_later(10, lambda: fired.append(2))
    assert scheduler.cancel(handle)
    assert not scheduler.cancel(handle)
    scheduler.advance(10)
    assert fired == [2]

    scheduler.call_later(10, lambda: fired.append(3))
    scheduler.clear()
    scheduler.advance(100)
    assert fired == [2]


def test_delay_is_relative_to_the_current_time():
    scheduler = Scheduler()
    fired = []
    scheduler.advance(500)
    scheduler.call_later(100, lambda: fired.append(True))
    scheduler.advance(99)
    assert not fired
    scheduler.advance(1)
    assert fired
