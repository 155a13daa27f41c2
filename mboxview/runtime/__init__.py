"""Public runtime orchestration entry points.

This package groups the interactive viewer bootstrap (``run_viewer``) and
the lower-level event loop contracts used by tests and composition code.
"""

from __future__ import annotations

from .loop import RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop


def run_viewer(*args, **kwargs):
    """Lazily import viewer entrypoint to avoid loading pygments on import."""
    from .app import run_viewer as _run_viewer

    return _run_viewer(*args, **kwargs)


__all__ = [
    "RuntimeLoopCallbacks",
    "RuntimeLoopTiming",
    "run_main_loop",
    "run_viewer",
]
