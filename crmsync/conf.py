"""
CRM Sync configuration.

Usage in settings.py:
    CRMSYNC = {
        "SYNC_CUSTOMERS_VIA_API": True,
        "EVENT_DISPATCHER": "crmsync.dispatch.SignalEventDispatcher",
    }

Values are read from Django settings on every access, so
override_settings (and the pytest-django ``settings`` fixture)
apply immediately.
"""

from dataclasses import dataclass, fields
from typing import Any

from django.conf import settings

from crmsync.exceptions import CrmSyncError


@dataclass(frozen=True)
class CrmSyncSettings:
    """CRM Sync configuration settings."""

    # Site preference: forward storefront API customer changes to the CRM
    SYNC_CUSTOMERS_VIA_API: bool = False

    # Dotted path of an EventDispatcher class or instance
    EVENT_DISPATCHER: str = "crmsync.dispatch.SignalEventDispatcher"

    # Dotted path of the SyncPreferences implementation
    PREFERENCES_BACKEND: str = "crmsync.preferences.SettingsSyncPreferences"

    # Connect inbound customer signals on app ready
    CONNECT_SIGNALS: bool = True

    @classmethod
    def names(cls) -> set[str]:
        return {f.name for f in fields(cls)}


def get_crmsync_settings() -> CrmSyncSettings:
    """
    Build CrmSyncSettings from settings.CRMSYNC.

    Raises:
        CrmSyncError: INVALID_SETTING for keys CrmSyncSettings does not define
    """
    user_settings: dict[str, Any] = getattr(settings, "CRMSYNC", None) or {}
    unknown = sorted(set(user_settings) - CrmSyncSettings.names())
    if unknown:
        raise CrmSyncError(
            "INVALID_SETTING",
            f"Unknown CRMSYNC settings: {', '.join(unknown)}",
            {"unknown": unknown, "allowed": sorted(CrmSyncSettings.names())},
        )
    return CrmSyncSettings(**user_settings)


class _CrmSyncSettingsProxy:
    """Attribute access to the current CRMSYNC values."""

    def __getattr__(self, name):
        if name not in CrmSyncSettings.names():
            raise AttributeError(f"Unknown CRMSYNC setting: {name}")
        return getattr(get_crmsync_settings(), name)


crmsync_settings = _CrmSyncSettingsProxy()
