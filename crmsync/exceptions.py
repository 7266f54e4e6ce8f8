"""CRM Sync exceptions."""


class CrmSyncError(Exception):
    """
    Structured exception for CRM sync configuration.

    Usage:
        try:
            dispatcher = get_dispatcher()
        except CrmSyncError as e:
            if e.code == "DISPATCHER_NOT_CONFIGURED":
                handle_missing_dispatcher()
    """

    _default_messages = {
        "DISPATCHER_NOT_CONFIGURED": "Event dispatcher not configured",
        "PREFERENCES_NOT_CONFIGURED": "Sync preferences backend not configured",
        "INVALID_BACKEND": "Backend could not be imported",
        "INVALID_SETTING": "Invalid CRMSYNC setting",
        "UNKNOWN_EVENT": "Unknown customer event channel",
    }

    def __init__(self, code: str, message: str | None = None, details: dict | None = None):
        self.code = code
        self.message = message or self._default_messages.get(code, code)
        self.details = details or {}
        super().__init__(f"[{code}] {self.message}")

    def as_dict(self) -> dict:
        return {"code": self.code, "message": self.message, "details": self.details}
