"""Data models shared across probrange."""

from __future__ import annotations

from probrange.data.range import SubRange

__all__ = ["SubRange"]
