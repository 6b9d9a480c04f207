"""
Controller package exports.

Provides a stable import surface for the Qt-facing controllers.
"""

from .practice_controller import PracticeController  # noqa: F401

__all__ = [
    "PracticeController",
]
