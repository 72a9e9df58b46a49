"""
Core services shared by the demos.

This package contains the generic in-memory repositories and the Result
type used to report expected failures.
"""

from .repository import KeyedRepository, Repository, Result

__all__ = [
    "KeyedRepository",
    "Repository",
    "Result",
]
