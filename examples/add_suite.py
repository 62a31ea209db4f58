"""Example suite mixing asynchronous and synchronous tests."""

import asyncio
import os

import asyncsuite


async def add_soon(*addends: int) -> int:
    await asyncio.sleep(0.01)
    return sum(addends)


def add_now(*addends: int) -> int:
    return sum(addends)


class AddSuite(asyncsuite.AsyncSuite):
    def __init__(self) -> None:
        super().__init__()

        @self.test("add_soon will eventually compute a sum of passed ints")
        async def eventually():
            assert await add_soon(1, 2) == 3

        @self.test("add_now will immediately compute a sum of passed ints")
        def immediately():
            assert add_now(1, 2) == 3
            return asyncsuite.succeed()

        @self.test("add_soon handles negative numbers")
        def not_written_yet():
            asyncsuite.pending()

        @self.test("add_soon matches the remote adder")
        def remote():
            if "ADDER_URL" not in os.environ:
                asyncsuite.cancel("ADDER_URL not configured")


if __name__ == "__main__":
    result = asyncsuite.run_suite(AddSuite())
    raise SystemExit(0 if result.ok else 1)
