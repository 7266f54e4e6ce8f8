"""
Customer sync hooks - storefront API to CRM.

Called after a customer is created (POST) or updated (PATCH) through the
storefront API. The event is forwarded only when:
    1. the site preference SYNC_CUSTOMERS_VIA_API is enabled
    2. the customer is authenticated

Usage:
    from crmsync.hooks import CustomerSyncHooks

    hooks = CustomerSyncHooks.from_settings()
    hooks.on_created(customer)
"""

import logging

from crmsync.events import CustomerEvent
from crmsync.protocols.customer import ApiCustomer
from crmsync.protocols.sync import EventDispatcher, SyncPreferences

logger = logging.getLogger(__name__)


class CustomerSyncHooks:
    """
    Forward storefront customer changes to the sync dispatcher.

    Stateless: every call reads the preference and dispatches at most once.
    Dispatcher errors propagate to the caller.
    """

    def __init__(self, preferences: SyncPreferences, dispatcher: EventDispatcher):
        self.preferences = preferences
        self.dispatcher = dispatcher

    @classmethod
    def from_settings(cls) -> "CustomerSyncHooks":
        """Build hooks from the CRMSYNC backends."""
        from crmsync.dispatch import get_dispatcher
        from crmsync.preferences import get_preferences

        return cls(preferences=get_preferences(), dispatcher=get_dispatcher())

    def on_created(self, customer: ApiCustomer) -> None:
        """After customer POST: forward app.customer.created."""
        self._forward(CustomerEvent.CREATED, customer)

    def on_updated(self, customer: ApiCustomer) -> None:
        """After customer PATCH: forward app.customer.updated."""
        self._forward(CustomerEvent.UPDATED, customer)

    def _forward(self, event: CustomerEvent, customer: ApiCustomer) -> None:
        if not self.preferences.get_sync_enabled():
            logger.debug("Skipping %s: reason=sync_disabled", event.channel)
            return

        if not customer.authenticated:
            logger.debug("Skipping %s: reason=not_authenticated", event.channel)
            return

        logger.debug("Forwarding %s", event.channel)
        self.dispatcher.dispatch(event.channel, event.action, customer.get_profile())
