"""Protocols for the collaborators of the customer sync hooks."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SyncPreferences(Protocol):
    """
    Site-level preferences for customer sync.

    Configuration in settings.py:
        CRMSYNC = {
            "PREFERENCES_BACKEND": "crmsync.preferences.SettingsSyncPreferences",
        }
    """

    def get_sync_enabled(self) -> bool:
        """Whether customers changed through the storefront API are synced."""
        ...


@runtime_checkable
class EventDispatcher(Protocol):
    """
    Forwards customer events to downstream subscribers.

    Configuration in settings.py:
        CRMSYNC = {
            "EVENT_DISPATCHER": "crmsync.dispatch.SignalEventDispatcher",
        }
    """

    def dispatch(self, channel: str, action: str, payload: Any) -> None:
        """
        Forward an event.

        Args:
            channel: Event channel (e.g. "app.customer.created")
            action: Event action (e.g. "created")
            payload: Customer profile
        """
        ...
