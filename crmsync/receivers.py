"""Signal receivers: storefront customer signals -> CustomerSyncHooks."""

from crmsync.hooks import CustomerSyncHooks


def on_customer_created(sender, customer, **kwargs):
    CustomerSyncHooks.from_settings().on_created(customer)


def on_customer_updated(sender, customer, **kwargs):
    CustomerSyncHooks.from_settings().on_updated(customer)


def connect() -> None:
    """Connect receivers (idempotent)."""
    from crmsync.signals import customer_created, customer_updated

    customer_created.connect(on_customer_created, dispatch_uid="crmsync.customer_created")
    customer_updated.connect(on_customer_updated, dispatch_uid="crmsync.customer_updated")


def disconnect() -> None:
    from crmsync.signals import customer_created, customer_updated

    customer_created.disconnect(dispatch_uid="crmsync.customer_created")
    customer_updated.disconnect(dispatch_uid="crmsync.customer_updated")
