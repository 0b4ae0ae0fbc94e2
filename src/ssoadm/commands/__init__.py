"""Command modules for ssoadm."""

from . import group, profile

__all__ = [
    "group",
    "profile",
]
