"""Keep Cloudflare A records in sync with the machine's public IP."""

__version__ = "0.1.0"
