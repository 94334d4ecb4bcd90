"""Application services for the temperature lookups.

These services orchestrate domain logic with infrastructure adapters
to fulfill use cases.
"""

from .gateway_application_service import GatewayApplicationService
from .resolver_application_service import ResolverApplicationService

__all__ = [
    "GatewayApplicationService",
    "ResolverApplicationService",
]
