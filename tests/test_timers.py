import time

import pytest

from workbench.timers import ClientData, SortedTimerList, Timer


def _expiries(timers):
    return [timer.expire for timer in timers]


def test_add_keeps_ascending_order():
    timers = SortedTimerList()
    inputs = [5.0, 1.0, 3.0, 4.0, 2.0]
    for expire in inputs:
        timers.add(Timer(expire))
    assert _expiries(timers) == sorted(inputs)
    assert len(timers) == len(inputs)


def test_equal_expiry_keeps_insertion_order():
    timers = SortedTimerList()
    first, second, third = Timer(2.0), Timer(2.0), Timer(1.0)
    for timer in (first, second, third):
        timers.add(timer)
    assert list(timers) == [third, first, second]


def test_tick_fires_expired_timers_with_user_data():
    seen = []
    timers = SortedTimerList()
    clients = [ClientData(("127.0.0.1", 8000 + i), i) for i in range(3)]
    for expire, client in zip((1.0, 2.0, 3.0), clients):
        client.timer = Timer(expire, seen.append, client)
        timers.add(client.timer)
    fired = timers.tick(now=2.0)
    assert fired == [clients[0].timer, clients[1].timer]
    assert seen == clients[:2]
    assert list(timers) == [clients[2].timer]


def test_tick_before_any_expiry_fires_nothing():
    timers = SortedTimerList()
    timers.add(Timer(10.0))
    assert timers.tick(now=9.5) == []
    assert len(timers) == 1


def test_tick_on_empty_list():
    assert SortedTimerList().tick(now=100.0) == []


def test_tick_defaults_to_current_time():
    timers = SortedTimerList()
    past = Timer(time.time() - 60)
    future = Timer(time.time() + 3600)
    timers.add(future)
    timers.add(past)
    assert timers.tick() == [past]
    assert list(timers) == [future]


def test_timer_without_callback_is_still_removed():
    timers = SortedTimerList()
    timer = Timer(1.0)
    timers.add(timer)
    assert timers.tick(now=1.0) == [timer]
    assert len(timers) == 0


@pytest.mark.parametrize("position", [0, 1, 2])
def test_remove_any_position(position):
    timers = SortedTimerList()
    created = [Timer(float(i)) for i in range(3)]
    for timer in created:
        timers.add(timer)
    timers.remove(created[position])
    assert list(timers) == [t for i, t in enumerate(created) if i != position]


def test_remove_only_timer():
    timers = SortedTimerList()
    timer = Timer(1.0)
    timers.add(timer)
    timers.remove(timer)
    assert list(timers) == []


def test_remove_unknown_timer_raises():
    timers = SortedTimerList()
    timers.add(Timer(1.0))
    with pytest.raises(ValueError):
        timers.remove(Timer(1.0))


def test_adjust_moves_extended_timer():
    timers = SortedTimerList()
    head, middle, tail = Timer(1.0), Timer(2.0), Timer(3.0)
    for timer in (head, middle, tail):
        timers.add(timer)
    head.expire = 4.0
    timers.adjust(head)
    assert list(timers) == [middle, tail, head]
    assert _expiries(timers) == sorted(_expiries(timers))


def test_adjust_unknown_timer_raises():
    with pytest.raises(ValueError):
        SortedTimerList().adjust(Timer(1.0))