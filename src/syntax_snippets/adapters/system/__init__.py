"""System adapter - lookups of ambient process state.

Contents:
    * :func:`.user.get_user_name` - Login name of the invoking user
"""

from __future__ import annotations

from .user import get_user_name

__all__ = ["get_user_name"]
