"""Qt presentation layer for the quiz player."""

from .qt_scheduler import QtTickHandle, QtTickScheduler

__all__ = ["QtTickHandle", "QtTickScheduler"]
