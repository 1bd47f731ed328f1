"""Provider integrations.

This package contains provider-specific clients, payload models and the
mapping of their odds into canonical line items.
"""

from . import espn as espn  # re-export namespace
from . import theodds as theodds

__all__ = ["espn", "theodds"]
