"""List zipper with a comonadic interface.

The core ``Zipper`` is an immutable non-empty sequence with a focused element.
``extend`` runs a neighbourhood-aware function at every position, which the
demo transforms (running/moving max, peaks, weighted moving average) and the
chart/dashboard layer build on.
"""

from .core.zipper import Zipper

__all__ = [
    "Zipper",
    "config",
    "core",
    "web",
    "utils",
]
