from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from domain import InvocationLogPort
from domain.services import InvocationLog
from infra.concurrency import SynchronizedInvocationLog
from test.mocks import InMemoryLogger

_WORKERS = 8
_CALLS_PER_WORKER = 250


def test_concurrent_writers_keep_every_record() -> None:
    log = SynchronizedInvocationLog()
    start = threading.Barrier(_WORKERS)

    def worker(worker_id: int) -> None:
        start.wait()
        for i in range(_CALLS_PER_WORKER):
            log.record("poke" if i % 2 == 0 else "bop", worker_id, i)

    with ThreadPoolExecutor(max_workers=_WORKERS) as pool:
        list(pool.map(worker, range(_WORKERS)))

    assert len(log) == _WORKERS * _CALLS_PER_WORKER
    assert log.count("poke") == _WORKERS * _CALLS_PER_WORKER // 2
    assert log.count("bop") == _WORKERS * _CALLS_PER_WORKER // 2

    for worker_id in range(_WORKERS):
        sequence = [r.arguments[1] for r in log.query("poke") if r.arguments[0] == worker_id]
        assert sequence == sorted(sequence)


def test_callback_fired_from_background_thread_is_recorded() -> None:
    log = SynchronizedInvocationLog()

    def on_done(result: str) -> None:
        log.record("on_done", result)

    thread = threading.Thread(target=on_done, args=("FAKE RESULT",))
    thread.start()
    thread.join()

    assert [r.arguments for r in log.query("on_done")] == [("FAKE RESULT",)]


def test_wraps_an_existing_log_and_keeps_its_history() -> None:
    logger = InMemoryLogger()
    inner = InvocationLog(logger=logger)
    inner.record("poke", "before wrapping")

    log: InvocationLogPort = SynchronizedInvocationLog(inner)
    log.record("poke", "after wrapping")

    assert [r.arguments[0] for r in log] == ["before wrapping", "after wrapping"]
    assert len(logger.events) == 2


def test_query_on_miss_is_empty() -> None:
    assert SynchronizedInvocationLog().query("neverCalled") == ()


def test_record_accepts_a_keyword_argument_named_method_name() -> None:
    log = SynchronizedInvocationLog()

    log.record("dispatch", method_name="poke")

    assert log.query("dispatch")[0].keyword_arguments == {"method_name": "poke"}
