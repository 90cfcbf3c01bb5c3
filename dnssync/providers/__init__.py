"""Remote services used by dnssync."""
