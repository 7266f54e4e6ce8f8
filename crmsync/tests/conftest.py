"""Pytest fixtures for CRM Sync tests."""

from unittest.mock import MagicMock

import pytest

from crmsync.hooks import CustomerSyncHooks
from crmsync.preferences import StaticSyncPreferences
from crmsync.protocols import CustomerProfile, StorefrontCustomer


@pytest.fixture
def profile():
    """Profile of a registered storefront customer."""
    return CustomerProfile(
        customer_no="00001",
        email="john@example.com",
        first_name="John",
        last_name="Doe",
    )


@pytest.fixture
def customer(profile):
    """Authenticated storefront customer."""
    return StorefrontCustomer(profile=profile, authenticated=True)


@pytest.fixture
def guest(profile):
    """Unauthenticated (guest) storefront customer."""
    return StorefrontCustomer(profile=profile, authenticated=False)


@pytest.fixture
def dispatcher():
    """Spy dispatcher."""
    return MagicMock(spec=["dispatch"])


@pytest.fixture
def hooks_enabled(dispatcher):
    return CustomerSyncHooks(StaticSyncPreferences(True), dispatcher)


@pytest.fixture
def hooks_disabled(dispatcher):
    return CustomerSyncHooks(StaticSyncPreferences(False), dispatcher)


@pytest.fixture
def sync_enabled(settings):
    """Enable SYNC_CUSTOMERS_VIA_API in Django settings."""
    settings.CRMSYNC = {"SYNC_CUSTOMERS_VIA_API": True}
    return settings
