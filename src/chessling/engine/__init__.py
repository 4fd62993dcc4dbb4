"""Automatic move selection.

The Qt timer bridge lives in :mod:`chessling.engine.qt_bridge` and is
imported explicitly by callers that run a Qt event loop.
"""

from chessling.engine.random_engine import RandomMover

__all__ = [
    "RandomMover",
]
