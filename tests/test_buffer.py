import threading
import time

import pytest

from workbench.buffer import (
    DEFAULT_CAPACITY,
    BoundedBuffer,
    SlotBuffer,
    consume_items,
    produce_items,
)

BUFFERS = [BoundedBuffer, SlotBuffer]


def _observe_full_put(buffer):
    """Fill a buffer of capacity 2, then watch a third put wait for room."""
    buffer.put(1)
    buffer.put(2)
    worker = threading.Thread(target=buffer.put, args=(3,))
    worker.start()
    time.sleep(0.05)
    waiting = worker.is_alive()
    size_while_full = len(buffer)
    first = buffer.get()
    worker.join(timeout=2)
    finished = not worker.is_alive()
    rest = [buffer.get(), buffer.get()]
    return waiting, size_while_full, first, finished, rest


def _observe_empty_get(buffer):
    """Watch a get on an empty buffer wait until an item is put."""
    received = []
    worker = threading.Thread(target=lambda: received.append(buffer.get()))
    worker.start()
    time.sleep(0.05)
    waiting = worker.is_alive()
    buffer.put("item")
    worker.join(timeout=2)
    finished = not worker.is_alive()
    return waiting, finished, received


def test_default_capacity():
    assert BoundedBuffer().capacity == DEFAULT_CAPACITY == 10
    assert SlotBuffer().capacity == DEFAULT_CAPACITY == 10


def test_put_get_is_fifo():
    for buffer in (BoundedBuffer(4), SlotBuffer(4)):
        for item in ("a", "b", "c"):
            buffer.put(item)
        assert len(buffer) == 3
        assert [buffer.get(), buffer.get(), buffer.get()] == ["a", "b", "c"]
        assert len(buffer) == 0


@pytest.mark.parametrize("capacity", [0, -3])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        BoundedBuffer(capacity)
    with pytest.raises(ValueError):
        SlotBuffer(capacity)


def test_put_blocks_when_full():
    expected = (True, 2, 1, True, [2, 3])
    assert _observe_full_put(BoundedBuffer(2)) == expected
    assert _observe_full_put(SlotBuffer(2)) == expected


def test_get_blocks_when_empty():
    expected = (True, True, ["item"])
    assert _observe_empty_get(BoundedBuffer(2)) == expected
    assert _observe_empty_get(SlotBuffer(2)) == expected


@pytest.mark.parametrize("kind", BUFFERS)
def test_produce_then_consume(kind):
    buffer = kind(5)
    assert produce_items(buffer, 3, 0) == list(range(3))
    assert len(buffer) == 3
    assert consume_items(buffer, 3, 0) == list(range(3))


@pytest.mark.parametrize("kind", BUFFERS)
def test_concurrent_round_exceeding_capacity(kind):
    buffer = kind(2)
    consumed = []
    consumer = threading.Thread(target=lambda: consumed.extend(consume_items(buffer, 20)))
    producer = threading.Thread(target=produce_items, args=(buffer, 20))
    consumer.start()
    producer.start()
    producer.join(timeout=5)
    consumer.join(timeout=5)
    assert consumed == list(range(20))
    assert len(buffer) == 0


def test_negative_delay_rejected():
    with pytest.raises(ValueError):
        produce_items(BoundedBuffer(), 1, -1)
    with pytest.raises(ValueError):
        consume_items(SlotBuffer(), 1, -1)