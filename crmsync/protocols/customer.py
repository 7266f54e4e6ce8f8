"""Customer protocols."""

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class CustomerProfile:
    """Customer attributes carried as the sync event payload."""

    customer_no: str
    email: str | None = None
    first_name: str = ""
    last_name: str = ""
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> str:
        """Full name (first + last)."""
        return f"{self.first_name} {self.last_name}".strip()


@runtime_checkable
class ApiCustomer(Protocol):
    """Customer object handed over by the storefront API layer."""

    authenticated: bool

    def get_profile(self) -> Any:
        """Return the customer profile (opaque to the sync hooks)."""
        ...


@dataclass(frozen=True)
class StorefrontCustomer:
    """Customer as seen by the storefront API after a POST or PATCH."""

    profile: CustomerProfile | None
    authenticated: bool = False

    def get_profile(self) -> CustomerProfile | None:
        return self.profile
