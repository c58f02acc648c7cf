import pytest

from udxkit.queue import Queue


class Packet:
    def __init__(self, seq):
        self.seq = seq


def test_push_preserves_order():
    q = Queue()
    items = [Packet(i) for i in range(4)]
    for item in items:
        q.push(item)
    assert list(q) == items
    assert len(q) == 4


def test_unshift_puts_at_head():
    q = Queue()
    a, b, c = Packet(1), Packet(2), Packet(3)
    q.push(a)
    q.unshift(b)
    q.unshift(c)
    assert list(q) == [c, b, a]


def test_peek_does_not_remove():
    q = Queue()
    a = Packet(1)
    q.push(a)
    assert q.peek() is a
    assert len(q) == 1


def test_shift_removes_head():
    q = Queue()
    a, b = Packet(1), Packet(2)
    q.push(a)
    q.push(b)
    assert q.shift() is a
    assert q.shift() is b
    assert q.shift() is None
    assert len(q) == 0


def test_empty_queue():
    q = Queue()
    assert q.peek() is None
    assert q.shift() is None
    assert list(q) == []


def test_unlink_middle():
    q = Queue()
    items = [Packet(i) for i in range(3)]
    for item in items:
        q.push(item)
    q.unlink(items[1])
    assert list(q) == [items[0], items[2]]
    assert items[1] not in q
    assert len(q) == 2


def test_unlink_missing_raises():
    q = Queue()
    with pytest.raises(ValueError):
        q.unlink(Packet(0))


def test_push_twice_raises():
    q = Queue()
    a = Packet(0)
    q.push(a)
    with pytest.raises(ValueError):
        q.push(a)


def test_item_can_move_between_queues():
    inflight = Queue()
    retransmit = Queue()
    a = Packet(5)
    inflight.push(a)
    inflight.unlink(a)
    retransmit.push(a)
    assert a in retransmit
    assert a not in inflight
    assert retransmit.peek() is a


def test_unlink_during_iteration():
    q = Queue()
    items = [Packet(i) for i in range(5)]
    for item in items:
        q.push(item)
    seen = []
    for item in q:
        seen.append(item)
        q.unlink(item)
    assert seen == items
    assert len(q) == 0


def test_equal_but_distinct_items_are_separate():
    q = Queue()
    a, b = (1, 2), tuple([1, 2])
    q.push(a)
    if a is not b:
        q.push(b)
        assert len(q) == 2
    else:
        assert len(q) == 1