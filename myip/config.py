# myip/config.py
"""Built-in defaults for the remote providers and timeouts."""
from typing import Tuple

# Providers answering with the caller's address as a plain text body.
DEFAULT_IPV4_URLS: Tuple[str, ...] = (
    "https://ipv4.icanhazip.com",
    "https://api.ipify.org",
    "https://ipv4.seeip.org",
)

DEFAULT_IPV6_URLS: Tuple[str, ...] = (
    "https://ipv6.icanhazip.com",
    "https://api6.ipify.org",
    "https://ipv6.seeip.org",
)

# Bounds the whole multi-provider race.
DEFAULT_RACE_TIMEOUT = 10.0
# Bounds a single HTTP round trip.
DEFAULT_PROBE_TIMEOUT = 5.0

# Enough for any textual IPv4 or IPv6 address plus surrounding whitespace.
RESPONSE_BYTE_BUDGET = 48

DEFAULT_SELECTION = "all"

# Registered probe plugin used by remote lookups.
DEFAULT_PROBE = "http"
