"""Interception adapter - observe-then-forward wrapper for subjects.

Contents:
    * :class:`.proxy.PersonInterceptor` - capability-preserving interceptor
"""

from __future__ import annotations

from .proxy import PersonInterceptor

__all__ = ["PersonInterceptor"]
