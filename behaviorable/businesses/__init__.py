"""
Businesses: typed data-access components extended by behaviors.

Re-exports the dispatcher, the SQLAlchemy-backed business and the
parameter/signal helpers every behavior works with.
"""

from .base import GenericBusiness, first_or_none
from .orm import BusinessQuery, SQLAlchemyBusiness
from .parameters import BusinessParameters, get_deep_value, set_deep_value
from .registry import InterceptorChains, Registry, finder
from .signals import Signal

__all__ = [
    "GenericBusiness",
    "first_or_none",
    "BusinessQuery",
    "SQLAlchemyBusiness",
    "BusinessParameters",
    "get_deep_value",
    "set_deep_value",
    "InterceptorChains",
    "Registry",
    "finder",
    "Signal",
]
