"""Public IP address providers."""

from dnssync.providers.address.base import AddressProvider, AddressProviderChain, first_success
from dnssync.providers.address.http import HTTPAddressProvider

__all__ = ["AddressProvider", "AddressProviderChain", "HTTPAddressProvider", "first_success"]
