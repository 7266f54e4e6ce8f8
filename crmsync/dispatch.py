"""
Event dispatchers for customer sync.

SignalEventDispatcher: every event goes out as customer_sync_requested.
EventSignalDispatcher: one signal per CustomerEvent (see EVENT_SIGNALS).

Usage:
    from django.dispatch import receiver

    from crmsync.signals import customer_sync_created

    @receiver(customer_sync_created)
    def push_to_crm(sender, action, profile, **kwargs):
        ...
"""

from typing import Any

from django.utils.module_loading import import_string

from crmsync.conf import crmsync_settings
from crmsync.events import CustomerEvent
from crmsync.exceptions import CrmSyncError
from crmsync.protocols.sync import EventDispatcher
from crmsync.signals import (
    customer_sync_created,
    customer_sync_requested,
    customer_sync_updated,
)

EVENT_SIGNALS = {
    CustomerEvent.CREATED: customer_sync_created,
    CustomerEvent.UPDATED: customer_sync_updated,
}


class SignalEventDispatcher:
    """
    Dispatch events through the customer_sync_requested signal.

    Receiver exceptions propagate to the caller (Signal.send).
    """

    def dispatch(self, channel: str, action: str, payload: Any) -> None:
        event = CustomerEvent.from_channel(channel)
        customer_sync_requested.send(
            sender=self.__class__,
            event=event,
            channel=channel,
            action=action,
            profile=payload,
        )


class EventSignalDispatcher:
    """
    Dispatch each event kind through its own signal.

    Receivers run in connection order; exceptions propagate to the caller.
    """

    def dispatch(self, channel: str, action: str, payload: Any) -> None:
        event = CustomerEvent.from_channel(channel)
        EVENT_SIGNALS[event].send(
            sender=self.__class__,
            action=action,
            profile=payload,
        )


def get_dispatcher() -> EventDispatcher:
    """
    Get configured EventDispatcher.

    The dotted path may name a class (instantiated per call) or a
    module-level dispatcher instance (returned as is).

    Raises:
        CrmSyncError: DISPATCHER_NOT_CONFIGURED if the path is empty,
            INVALID_BACKEND if it cannot be imported
    """
    backend_path = crmsync_settings.EVENT_DISPATCHER
    if not backend_path:
        raise CrmSyncError("DISPATCHER_NOT_CONFIGURED")
    try:
        backend = import_string(backend_path)
    except ImportError as exc:
        raise CrmSyncError(
            "INVALID_BACKEND",
            f"Cannot import event dispatcher '{backend_path}'.",
            {"path": backend_path, "error": str(exc)},
        ) from exc
    if isinstance(backend, type):
        return backend()
    return backend
