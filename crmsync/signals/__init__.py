"""
CRM Sync signals - public event API.

Received signals (sent by the storefront API layer):
- customer_created: after a successful customer POST (kwarg: customer)
- customer_updated: after a successful customer PATCH (kwarg: customer)

Emitted signals:
- customer_sync_requested: Emitted by dispatch.SignalEventDispatcher
  (kwargs: event, channel, action, profile)
- customer_sync_created / customer_sync_updated: Emitted by
  dispatch.EventSignalDispatcher, one signal per event kind
  (kwargs: action, profile)
"""

from django.dispatch import Signal

# Storefront API signals (received by receivers)
customer_created = Signal()  # customer=ApiCustomer
customer_updated = Signal()  # customer=ApiCustomer

# Outbound sync signals
customer_sync_requested = Signal()  # event, channel, action, profile
customer_sync_created = Signal()  # action, profile
customer_sync_updated = Signal()  # action, profile
