import threading

import pytest

from samplekit.engine import RandomEngine, resolve_engine, shared_engine


def test_shared_engine_is_a_singleton():
    assert shared_engine() is shared_engine()
    assert shared_engine().seed is None


def test_shared_engine_created_once_across_threads():
    seen = []

    def grab():
        seen.append(shared_engine())

    threads = [threading.Thread(target=grab) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len({id(e) for e in seen}) == 1


def test_resolve_engine_prefers_explicit_engine():
    engine = RandomEngine(3)
    assert resolve_engine(engine) is engine
    assert resolve_engine(None) is shared_engine()


def test_seeded_engines_repeat_the_same_stream():
    e1 = RandomEngine(12345)
    e2 = RandomEngine(12345)
    assert [e1.randint(0, 1000) for _ in range(20)] == [e2.randint(0, 1000) for _ in range(20)]
    assert e1.random() == e2.random()


def test_choice_rejects_empty_sequence():
    with pytest.raises(ValueError):
        RandomEngine(1).choice([])
