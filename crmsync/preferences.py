"""Sync preferences backends."""

from django.utils.module_loading import import_string

from crmsync.conf import crmsync_settings
from crmsync.exceptions import CrmSyncError
from crmsync.protocols.sync import SyncPreferences


class SettingsSyncPreferences:
    """Reads CRMSYNC["SYNC_CUSTOMERS_VIA_API"] on every call."""

    def get_sync_enabled(self) -> bool:
        return bool(crmsync_settings.SYNC_CUSTOMERS_VIA_API)


class StaticSyncPreferences:
    """Fixed preference value (scripts, tests)."""

    def __init__(self, enabled: bool):
        self.enabled = enabled

    def get_sync_enabled(self) -> bool:
        return self.enabled

    def __repr__(self):
        return f"StaticSyncPreferences(enabled={self.enabled!r})"


def get_preferences() -> SyncPreferences:
    """
    Get configured SyncPreferences.

    Raises:
        CrmSyncError: PREFERENCES_NOT_CONFIGURED if the path is empty,
            INVALID_BACKEND if it cannot be imported
    """
    backend_path = crmsync_settings.PREFERENCES_BACKEND
    if not backend_path:
        raise CrmSyncError("PREFERENCES_NOT_CONFIGURED")
    try:
        backend_class = import_string(backend_path)
    except ImportError as exc:
        raise CrmSyncError(
            "INVALID_BACKEND",
            f"Cannot import preferences backend '{backend_path}'.",
            {"path": backend_path, "error": str(exc)},
        ) from exc
    return backend_class()
