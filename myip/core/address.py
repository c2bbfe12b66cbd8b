# myip/core/address.py
"""
Parsing and classification of IP addresses.

Every address that enters the system, whether it comes from a remote provider
or from a local interface, goes through `parse_address`.
"""
import ipaddress

from myip.core.errors import AddressParseError
from myip.core.models import Family, IPAddress

_IPV4_LINK_LOCAL_MULTICAST = ipaddress.IPv4Network("224.0.0.0/24")


def parse_address(text: str) -> IPAddress:
    """
    Parses a dotted-quad or colon-hex address after trimming surrounding whitespace.

    Raises:
        AddressParseError: if anything other than a single well formed address remains.
    """
    if not isinstance(text, str):
        raise AddressParseError(repr(text))

    candidate = text.strip()
    # zone identifiers ("fe80::1%eth0") are not part of an address literal
    if not candidate or "%" in candidate:
        raise AddressParseError(text)

    try:
        return ipaddress.ip_address(candidate)
    except ValueError:
        raise AddressParseError(text) from None


def _as_ipv4(address: IPAddress) -> IPAddress:
    if isinstance(address, ipaddress.IPv6Address) and address.ipv4_mapped is not None:
        return address.ipv4_mapped
    return address


def classify_family(address: IPAddress) -> Family:
    """IPv4 if the address has a 4-byte form (IPv4-mapped included), IPv6 otherwise."""
    if isinstance(_as_ipv4(address), ipaddress.IPv4Address):
        return Family.IPV4
    return Family.IPV6


def is_link_local_multicast(address: IPAddress) -> bool:
    address = _as_ipv4(address)
    if isinstance(address, ipaddress.IPv4Address):
        return address in _IPV4_LINK_LOCAL_MULTICAST
    # ffx2::/16, scope nibble 2 is link-local
    return address.is_multicast and (address.packed[1] & 0x0F) == 0x02


def is_excluded_local(address: IPAddress) -> bool:
    """True for loopback and link-local (unicast or multicast) addresses of either family."""
    address = _as_ipv4(address)
    if address.is_loopback:
        return True
    return address.is_link_local or is_link_local_multicast(address)
