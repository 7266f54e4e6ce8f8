"""
Django CRM Sync - storefront customer event forwarding.

Usage:
    from crmsync import CustomerSyncHooks, CustomerEvent

    hooks = CustomerSyncHooks.from_settings()
    hooks.on_created(customer)   # -> "app.customer.created", "created", profile
    hooks.on_updated(customer)   # -> "app.customer.updated", "updated", profile
"""


def __getattr__(name):
    if name == "CustomerSyncHooks":
        from crmsync.hooks import CustomerSyncHooks

        return CustomerSyncHooks
    if name == "CustomerEvent":
        from crmsync.events import CustomerEvent

        return CustomerEvent
    if name == "CrmSyncError":
        from crmsync.exceptions import CrmSyncError

        return CrmSyncError
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["CustomerSyncHooks", "CustomerEvent", "CrmSyncError"]
__version__ = "0.1.0"
