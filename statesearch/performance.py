"""
Performance timing utilities for search runs.

Provides decorators and context managers for measuring execution time
of engine phases with hierarchical output.
"""

import time
import functools
from typing import Optional, List, Dict, Any
from contextlib import contextmanager
import threading


class PerformanceTimer:
    """Thread-safe performance timer with hierarchical timing support."""

    def __init__(self):
        self._local = threading.local()

    def _get_stack(self) -> List[Dict[str, Any]]:
        """Get the current thread's timing stack."""
        if not hasattr(self._local, 'stack'):
            self._local.stack = []
        return self._local.stack

    def _get_results(self) -> List[Dict[str, Any]]:
        """Get the current thread's finished top-level timings."""
        if not hasattr(self._local, 'results'):
            self._local.results = []
        return self._local.results

    def clear(self):
        self._local.results = []

    @property
    def results(self) -> List[Dict[str, Any]]:
        return list(self._get_results())

    @contextmanager
    def time_block(self, name: str):
        """Context manager for timing a code block.

        Args:
            name: Name of the code block being timed

        Yields:
            None
        """
        from statesearch.config import SearchConfig

        if not SearchConfig.enable_performance_logging:
            yield
            return

        stack = self._get_stack()
        timing_info = {
            'name': name,
            'start': time.perf_counter(),
            'depth': len(stack),
            'children': []
        }
        stack.append(timing_info)

        try:
            yield
        finally:
            end_time = time.perf_counter()
            stack.pop()
            timing_info['elapsed'] = end_time - timing_info['start']
            timing_info['end'] = end_time

            # Nested blocks hang off their parent
            if stack:
                stack[-1]['children'].append(timing_info)
            else:
                self._get_results().append(timing_info)

    def format_results(self) -> str:
        """Render the timing tree as text (empty string if nothing was timed)."""
        results = self._get_results()
        if not results:
            return ""

        total_time = sum(r['elapsed'] for r in results)
        lines = ["=" * 80, "SEARCH PERFORMANCE REPORT", "=" * 80]

        def add_timing(timing: Dict[str, Any], parent_time: Optional[float] = None):
            elapsed = timing['elapsed']
            indent = "  " * timing['depth']
            if parent_time:
                percentage = (elapsed / parent_time) * 100
                lines.append(f"{indent}{timing['name']}: {elapsed:.3f}s ({percentage:.1f}%)")
            else:
                lines.append(f"{indent}{timing['name']}: {elapsed:.3f}s")
            for child in timing['children']:
                add_timing(child, elapsed)

        for result in results:
            add_timing(result, total_time)

        lines.append("-" * 80)
        lines.append(f"TOTAL: {total_time:.3f}s")
        lines.append("=" * 80)
        return "\n".join(lines)

    def print_results(self):
        """Print formatted timing results with hierarchy, then clear them."""
        from statesearch.config import SearchConfig

        if not SearchConfig.enable_performance_logging:
            return

        report = self.format_results()
        if report:
            print("\n" + report + "\n")
        self.clear()


# Global timer instance
_timer = PerformanceTimer()


def get_timer() -> PerformanceTimer:
    return _timer


def timed(func):
    """Decorator to time function execution.

    Measures execution time when performance logging is enabled.
    Nested timed calls show up as children of the outer call.

    Args:
        func: Function to be timed

    Returns:
        Wrapped function
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from statesearch.config import SearchConfig

        if not SearchConfig.enable_performance_logging:
            return func(*args, **kwargs)

        name = f"{func.__module__}.{func.__qualname__}"

        with _timer.time_block(name):
            return func(*args, **kwargs)

    return wrapper


def print_performance_report():
    """Print the accumulated performance timing report."""
    _timer.print_results()


@contextmanager
def time_block(name: str):
    """Context manager for timing arbitrary code blocks.

    Example:
        with time_block("expand"):
            # code to time
            pass

    Args:
        name: Name of the operation being timed

    Yields:
        None
    """
    with _timer.time_block(name):
        yield
