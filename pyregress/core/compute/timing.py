"""
Execution timing utilities.

Backends time each phase of a fit (accumulation, inversion, residual pass,
Newton-Raphson iterations) and attach the breakdown to their Result.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Accumulating phase timer.

    Usage:
        timer = Timer()
        timer.start()

        with timer.section('normal_equations'):
            eq = accumulate_normal_equations(y, xs)

        with timer.section('inversion'):
            inv = invert(eq.work)

        timer.stop()
        result = timer.result()
        # {'total_seconds': 0.002, 'normal_equations': 0.0015, 'inversion': 0.0001}
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        """Start the overall timer."""
        self._start_time = time.perf_counter()

    def stop(self) -> None:
        """Stop the overall timer."""
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._start_time

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Time a named section.

        Calling the same section repeatedly (once per Newton-Raphson
        iteration, say) accumulates into a single entry.
        """
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            self._sections[name] = self._sections.get(name, 0.0) + elapsed

    def result(self) -> dict[str, float]:
        """
        Get timing results.

        Returns:
            Dictionary with 'total_seconds' and all section timings

        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")

        result = {'total_seconds': self._total}
        result.update(self._sections)
        return result


@contextmanager
def timed() -> Iterator[Timer]:
    """
    Context manager for simple timing.

    Usage:
        with timed() as timer:
            betas = linear_regress_beta(y, repeat(1), x)
        print(f"Took {timer.result()['total_seconds']:.3f}s")
    """
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
