"""
Domain Interfaces (Ports)
"""

from .repositories import StateRepository

__all__ = [
    "StateRepository",
]
