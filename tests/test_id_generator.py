"""Tests for id generation."""

from fintrack.utils.id_generator import IdGenerator


def test_ids_follow_clock_when_it_advances():
    ticks = iter([1000, 2000, 3000])
    generator = IdGenerator(clock=lambda: next(ticks))

    assert [generator.next_id() for _ in range(3)] == [1000, 2000, 3000]


def test_ids_strictly_increase_within_same_millisecond():
    generator = IdGenerator(clock=lambda: 5000)

    assert [generator.next_id() for _ in range(3)] == [5000, 5001, 5002]


def test_ids_never_go_backwards_when_clock_does():
    ticks = iter([5000, 4000])
    generator = IdGenerator(clock=lambda: next(ticks))

    first = generator.next_id()
    assert generator.next_id() == first + 1


def test_seed_moves_generator_past_existing_ids():
    generator = IdGenerator(clock=lambda: 10)
    generator.seed(500)
    generator.seed(20)

    assert generator.next_id() == 501
