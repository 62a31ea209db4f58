"""Example of tests that hand back deferred results and futures."""

import threading
from concurrent.futures import ThreadPoolExecutor

from asyncsuite import AsyncSuite, Promise, Succeeded, run_suite, trace_step


executor = ThreadPoolExecutor(max_workers=2)
suite = AsyncSuite("DeferredExamples")


@suite.test("a promise completed from a timer thread")
def timer_promise():
    promise = Promise()
    threading.Timer(0.05, promise.complete, args=(Succeeded(),)).start()
    return promise.deferred


@suite.test("a deferred result mapped onto an assertion")
def mapped():
    promise = Promise()
    threading.Timer(0.01, promise.complete, args=(41,)).start()

    def check(value: int):
        assert value + 1 == 42
        return Succeeded()

    return promise.deferred.map(check)


@suite.test("a concurrent future from an executor")
def future():
    def work():
        with trace_step("work"):
            assert sum(range(10)) == 45

    return executor.submit(work)


if __name__ == "__main__":
    try:
        run_suite(suite)
    finally:
        executor.shutdown()
