"""
Behaviorable: pluggable behaviors around the CRUD lifecycle of a business.
"""

__version__ = "0.1.0"
