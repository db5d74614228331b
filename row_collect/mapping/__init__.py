"""Mapping layer - build typed objects from cursor rows."""

from __future__ import annotations

from row_collect.mapping.model import ModelRowConverter

__all__ = [
    "ModelRowConverter",
]
