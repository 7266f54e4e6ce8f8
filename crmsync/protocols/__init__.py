"""CRM Sync protocols."""

from crmsync.protocols.customer import (
    ApiCustomer,
    CustomerProfile,
    StorefrontCustomer,
)
from crmsync.protocols.sync import (
    EventDispatcher,
    SyncPreferences,
)

__all__ = [
    # Customer
    "ApiCustomer",
    "CustomerProfile",
    "StorefrontCustomer",
    # Sync collaborators
    "EventDispatcher",
    "SyncPreferences",
]
