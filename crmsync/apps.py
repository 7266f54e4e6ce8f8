from django.apps import AppConfig


class CrmSyncConfig(AppConfig):
    name = "crmsync"
    verbose_name = "CRM Sync - Customer Event Forwarding"

    def ready(self):
        from crmsync.conf import crmsync_settings

        if crmsync_settings.CONNECT_SIGNALS:
            from crmsync import receivers

            receivers.connect()
