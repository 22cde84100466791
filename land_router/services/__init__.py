"""Services layer - Application orchestration.

Available services:
- RoutingService: Holds the border graph and answers route queries
"""

from .routing_service import RoutingService, canonical_code

__all__ = ["RoutingService", "canonical_code"]
