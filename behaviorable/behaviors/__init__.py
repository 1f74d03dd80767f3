"""
Behaviors that can be attached to a business.

Re-exports the base classes and the bundled behaviors.
"""

from .base import BaseBehavior, BusinessBehavior
from .capabilities import Identifiable, Sluggable, SoftDeletable, TimeStampable
from .sluggable import SluggableBehavior
from .soft_deletable import SoftDeletableBehavior
from .timestampable import TimeStampableBehavior

__all__ = [
    "BaseBehavior",
    "BusinessBehavior",
    "Identifiable",
    "Sluggable",
    "SoftDeletable",
    "TimeStampable",
    "SluggableBehavior",
    "SoftDeletableBehavior",
    "TimeStampableBehavior",
]
