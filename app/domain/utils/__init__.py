"""
Domain utilities module.

Provides shared utilities for the domain layer that remain
independent of infrastructure concerns.
"""

from .concurrency import gather_bounded, first_failure

__all__ = ["gather_bounded", "first_failure"]
