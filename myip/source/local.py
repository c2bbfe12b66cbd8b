# myip/source/local.py

import socket
from abc import ABC, abstractmethod
from typing import Any, List, Optional

import psutil

from myip.core.address import classify_family, is_excluded_local, parse_address
from myip.core.errors import AddressParseError, EnumerationError
from myip.core.models import CandidateSet, Family, IPAddress, Origin
from myip.core.registry import myip
from .base import AddressSource

_IP_FAMILIES = (socket.AF_INET, socket.AF_INET6)


class LocalEnumerator(ABC):
    """Lists every address bound to a local network interface."""

    @abstractmethod
    def list_interface_addresses(self) -> List[IPAddress]:
        ...


class PsutilEnumerator(LocalEnumerator):
    """Reads the interface table through psutil, in interface order."""

    def list_interface_addresses(self) -> List[IPAddress]:
        try:
            interfaces = psutil.net_if_addrs()
        except (OSError, psutil.Error) as e:
            raise EnumerationError(f"Could not list the local network interfaces: {e}") from e

        addresses: List[IPAddress] = []
        for interface, entries in interfaces.items():
            for entry in entries:
                # link-layer entries (AF_LINK / AF_PACKET) carry MAC addresses
                if entry.family not in _IP_FAMILIES:
                    continue
                try:
                    addresses.append(parse_address(entry.address.split("%")[0]))
                except AddressParseError as e:
                    raise EnumerationError(f"Interface {interface} reported an invalid address: {e}") from e
        return addresses


@myip(kind="source", name="local")
class LocalAddressSource(AddressSource):
    """Addresses bound to the local network interfaces, without loopback and link-local ones."""

    version = "0.1.0"
    description = "Get your local IP address"
    origin = Origin.LOCAL

    enumerator: LocalEnumerator

    def __init__(self, enumerator: Optional[LocalEnumerator] = None, **kwargs: Any):
        super().__init__(**kwargs)
        self.enumerator = enumerator if enumerator is not None else PsutilEnumerator()

    def _filtered(self, family: Family) -> CandidateSet:
        all_addresses = self.enumerator.list_interface_addresses()

        addresses = [
            address for address in all_addresses
            if not is_excluded_local(address) and classify_family(address) is family
        ]
        self.debug(f"{len(addresses)} of {len(all_addresses)} local addresses are usable {family.label} addresses")
        return self._candidates(family, addresses)

    def get_ipv4_addresses(self) -> CandidateSet:
        return self._filtered(Family.IPV4)

    def get_ipv6_addresses(self) -> CandidateSet:
        return self._filtered(Family.IPV6)
