"""Exceptions raised while syncing DNS records."""


class DNSSyncError(Exception):
    """Base class for all dnssync errors."""


class ConfigMissingError(DNSSyncError):
    """A required configuration value is not set."""

    def __init__(self, variable: str):
        super().__init__(f"{variable} is not set")
        self.variable = variable


class DomainResolutionError(DNSSyncError):
    """Base class for failures scoped to a single monitored domain."""

    def __init__(self, message: str, domain: str):
        super().__init__(message)
        self.domain = domain


class DomainParseError(DomainResolutionError):
    """The domain is not a valid, publicly listed name."""

    def __init__(self, domain: str, reason: str = "invalid domain"):
        super().__init__(f"Failed to parse domain {domain}: {reason}", domain)
        self.reason = reason


class ZoneNotFoundError(DomainResolutionError):
    """No zone exists for the domain's root domain."""

    def __init__(self, domain: str, root_domain: str):
        super().__init__(f"Zone not found for domain: {root_domain}", domain)
        self.root_domain = root_domain


class NoRecordsInZoneError(DomainResolutionError):
    """The zone exists but holds no records at all."""

    def __init__(self, domain: str, root_domain: str):
        super().__init__(
            f"No existing DNS records found for root domain: {root_domain}", domain
        )
        self.root_domain = root_domain


class RecordNotFoundError(DomainResolutionError):
    """The zone holds no A record usable for the domain."""

    def __init__(self, domain: str):
        super().__init__(f"DNS record not found for domain: {domain}", domain)


class AllProvidersFailedError(DNSSyncError):
    """Every public address service failed."""

    def __init__(self, failures: list[tuple[str, Exception]]):
        names = ", ".join(name for name, _ in failures) or "none configured"
        super().__init__(
            f"Failed to fetch public IP address from all available services ({names})"
        )
        self.failures = failures


class ProviderError(DNSSyncError):
    """Base class for errors talking to a remote service."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class AuthError(ProviderError):
    """The provider rejected our credentials."""


class TransportError(ProviderError):
    """Network failure or an error response from a remote service."""
