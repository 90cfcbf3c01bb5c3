"""Domain name parsing with support for a leading wildcard label."""

import re
from dataclasses import dataclass

import tldextract

from dnssync.errors import DomainParseError

WILDCARD_LABEL = "*"
MAX_DOMAIN_LENGTH = 253

_LABEL_PATTERN = re.compile(r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)$")

# Bundled Public Suffix List snapshot only, never fetched over the network
_extract = tldextract.TLDExtract(suffix_list_urls=(), cache_dir=None)


@dataclass(frozen=True)
class ParsedDomain:
    """A monitored domain split around its public suffix."""

    domain: str
    root_domain: str
    subdomain: str
    suffix: str
    labels: tuple[str, ...]

    @property
    def is_wildcard(self) -> bool:
        return self.labels[0] == WILDCARD_LABEL


def _invalid_labels(labels: list[str]) -> list[str]:
    return [label for label in labels if not _LABEL_PATTERN.match(label)]


def _validate(domain: str) -> list[str]:
    """Validate label syntax, allowing only a leading "*" label.

    Returns the labels. Strict validation runs first; if the only offending
    label is a leftmost "*", the name is accepted as a wildcard.
    """
    if not domain:
        raise DomainParseError(domain, "empty domain")
    if len(domain) > MAX_DOMAIN_LENGTH:
        raise DomainParseError(domain, "domain is too long")

    labels = domain.split(".")
    invalid = _invalid_labels(labels)
    if not invalid:
        return labels

    if labels[0] == WILDCARD_LABEL and not _invalid_labels(labels[1:]):
        return labels

    raise DomainParseError(domain, f'label "{invalid[0]}" is not valid')


def classify(domain: str) -> ParsedDomain:
    """Parse a domain into its root domain and label chain.

    Args:
        domain: A domain name such as "www.example.co.uk" or "*.example.com"

    Returns:
        The parsed domain; ``root_domain`` is the registrable label joined
        with the full public suffix (e.g. "example.co.uk").

    Raises:
        DomainParseError: If the name is malformed or not under a listed suffix.
    """
    labels = _validate(domain)

    parts = _extract(domain)
    if not parts.suffix:
        raise DomainParseError(domain, "not under a listed public suffix")
    if not parts.domain or parts.domain == WILDCARD_LABEL:
        raise DomainParseError(domain, "no registrable domain")

    return ParsedDomain(
        domain=domain,
        root_domain=f"{parts.domain}.{parts.suffix}",
        subdomain=parts.subdomain,
        suffix=parts.suffix,
        labels=tuple(labels),
    )


def is_valid_domain(domain: str) -> bool:
    """Check whether a domain can be classified."""
    try:
        classify(domain)
    except DomainParseError:
        return False
    return True
