"""Building blocks for an HTTP client: header parsing, URL encoding, timeouts, SSL flags, errors and responses."""

__version__ = "0.1.0"

__all__ = ["error", "response", "ssl_options", "timeout", "util"]