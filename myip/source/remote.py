# myip/source/remote.py

import asyncio
from typing import Any, List, Optional, Sequence

from myip.config import DEFAULT_RACE_TIMEOUT
from myip.core.address import classify_family
from myip.core.errors import FamilyMismatchError
from myip.core.models import CandidateSet, Endpoint, Family, Origin, ResolverConfig
from myip.core.registry import myip
from myip.probe.base import ProbePlugin
from myip.race import RemoteRace
from .base import AddressSource


@myip(kind="source", name="remote")
class RemoteAddressSource(AddressSource):
    """
    The address remote services see for this host.

    Each family has its own list of providers; every lookup races all providers of
    that family and keeps the first answer. The winning address is checked against
    the requested family, since a misbehaving provider may answer with the other one.
    """

    version = "0.1.0"
    description = "Get your remote IP address"
    origin = Origin.REMOTE

    ipv4_endpoints: List[Endpoint]
    ipv6_endpoints: List[Endpoint]
    race_timeout: float

    def __init__(
        self,
        ipv4_endpoints: Sequence[Endpoint] = (),
        ipv6_endpoints: Sequence[Endpoint] = (),
        race_timeout: float = DEFAULT_RACE_TIMEOUT,
        probe: Optional[ProbePlugin] = None,
        **kwargs: Any,
    ):
        super().__init__(**kwargs)
        if race_timeout <= 0:
            raise ValueError(f"race_timeout must be positive, got {race_timeout}")
        self.ipv4_endpoints = list(ipv4_endpoints)
        self.ipv6_endpoints = list(ipv6_endpoints)
        self.race_timeout = race_timeout
        self._race = RemoteRace(probe)

    @classmethod
    def from_config(cls, config: ResolverConfig, **kwargs: Any) -> "RemoteAddressSource":
        return cls(
            ipv4_endpoints=config.ipv4_endpoints(),
            ipv6_endpoints=config.ipv6_endpoints(),
            race_timeout=config.race_timeout,
            **kwargs,
        )

    def _lookup(self, family: Family, endpoints: List[Endpoint]) -> CandidateSet:
        self.info(f"Asking {len(endpoints)} {family.label} providers")
        address = asyncio.run(self._race.race(endpoints, self.race_timeout))

        if classify_family(address) is not family:
            raise FamilyMismatchError(f"The returned IP address ({address}) is not an {family.label} address")

        return self._candidates(family, [address])

    def get_ipv4_addresses(self) -> CandidateSet:
        return self._lookup(Family.IPV4, self.ipv4_endpoints)

    def get_ipv6_addresses(self) -> CandidateSet:
        return self._lookup(Family.IPV6, self.ipv6_endpoints)
