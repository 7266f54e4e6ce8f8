"""Customer sync event kinds."""

from enum import Enum

from crmsync.exceptions import CrmSyncError


class CustomerEvent(Enum):
    """
    Events forwarded to the CRM sync dispatcher.

    Each member carries its (channel, action) pair:
        CREATED -> ("app.customer.created", "created")
        UPDATED -> ("app.customer.updated", "updated")
    """

    CREATED = ("app.customer.created", "created")
    UPDATED = ("app.customer.updated", "updated")

    @property
    def channel(self) -> str:
        return self.value[0]

    @property
    def action(self) -> str:
        return self.value[1]

    @classmethod
    def from_channel(cls, channel: str) -> "CustomerEvent":
        """
        Resolve an event kind from its channel name.

        Raises:
            CrmSyncError: UNKNOWN_EVENT if no event uses this channel
        """
        for event in cls:
            if event.channel == channel:
                return event
        raise CrmSyncError(
            "UNKNOWN_EVENT",
            f"Unknown customer event channel: {channel}",
            {"channel": channel, "known": [e.channel for e in cls]},
        )
