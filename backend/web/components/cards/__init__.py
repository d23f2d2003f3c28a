"""
Card components for the message wall.
"""

from .result import SuccessCard
from .slide import SlideCard

__all__ = ["SlideCard", "SuccessCard"]
