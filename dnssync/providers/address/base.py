"""Abstract public address provider and the ordered fallback chain."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Sequence

from dnssync.errors import AllProvidersFailedError, DNSSyncError


class AddressProvider(ABC):
    """Abstract public IP address source."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name used in reports (e.g. the service URL)."""
        pass

    @abstractmethod
    def get_address(self) -> str | None:
        """Fetch the current public IP address.

        Returns:
            The address, or None if the response carried no usable value

        Raises:
            TransportError: If the service could not be queried
        """
        pass


ErrorCallback = Callable[[AddressProvider, Exception], None]


class NoAddressError(DNSSyncError):
    """A service answered without any usable address."""


def first_success(
    providers: Iterable[AddressProvider], on_error: ErrorCallback | None = None
) -> str:
    """Return the address of the first provider that yields one.

    Each provider is tried once, in order. Providers that raise or return an
    empty value are skipped.

    Raises:
        AllProvidersFailedError: If no provider yields an address.
    """
    failures: list[tuple[str, Exception]] = []

    for provider in providers:
        try:
            address = provider.get_address()
            if not address:
                raise NoAddressError(f"No IP address in response from {provider.name}")
        except DNSSyncError as e:
            failures.append((provider.name, e))
            if on_error is not None:
                on_error(provider, e)
            continue
        return address

    raise AllProvidersFailedError(failures)


class AddressProviderChain:
    """Ordered list of address providers tried until one succeeds."""

    def __init__(self, providers: Sequence[AddressProvider]):
        self.providers = list(providers)

    @classmethod
    def from_urls(cls, urls: Iterable[str], timeout: float = 5.0) -> "AddressProviderChain":
        from dnssync.providers.address.http import HTTPAddressProvider

        return cls([HTTPAddressProvider(url, timeout=timeout) for url in urls])

    def resolve(self, on_error: ErrorCallback | None = None) -> str:
        return first_success(self.providers, on_error=on_error)
