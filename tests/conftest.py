# tests/conftest.py
import asyncio
import ipaddress
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import pytest

from myip.core.address import parse_address
from myip.core.models import CandidateSet, Endpoint, Family, Origin, ProbeOutcome
from myip.probe.base import ProbePlugin
from myip.source.base import AddressSource
from myip.source.local import LocalEnumerator

# (delay in seconds, answer): a string answer is an address, None a failure, an exception is raised
Script = Dict[str, Tuple[float, Union[str, None, Exception]]]


class ScriptedProbe(ProbePlugin):
    """Answers from a fixed script instead of the network."""
    name = "scripted"
    version = "0.0.0"

    def __init__(self, script: Script, **kwargs: Any):
        super().__init__(**kwargs)
        self.script = script
        self.started: List[str] = []

    async def probe(self, endpoint: Endpoint, **kwargs: Any) -> ProbeOutcome:
        self.started.append(endpoint.url)
        delay, answer = self.script[endpoint.url]
        await asyncio.sleep(delay)
        if isinstance(answer, Exception):
            raise answer
        if answer is None:
            return self._failure(endpoint, "scripted failure")
        return self._success(endpoint, parse_address(answer))


class StaticEnumerator(LocalEnumerator):
    def __init__(self, addresses: Sequence[str]):
        self.addresses = [parse_address(address) for address in addresses]

    def list_interface_addresses(self):
        return list(self.addresses)


class StaticSource(AddressSource):
    """Returns fixed candidates; an error, when given, is raised instead."""
    name = "static"
    version = "0.0.0"
    origin = Origin.LOCAL

    def __init__(self, ipv4: Sequence[str] = (), ipv6: Sequence[str] = (), error: Optional[Exception] = None, **kwargs: Any):
        super().__init__(**kwargs)
        self.ipv4 = [ipaddress.ip_address(address) for address in ipv4]
        self.ipv6 = [ipaddress.ip_address(address) for address in ipv6]
        self.error = error
        self.calls: List[Family] = []

    def get_ipv4_addresses(self) -> CandidateSet:
        self.calls.append(Family.IPV4)
        if self.error:
            raise self.error
        return self._candidates(Family.IPV4, self.ipv4)

    def get_ipv6_addresses(self) -> CandidateSet:
        self.calls.append(Family.IPV6)
        if self.error:
            raise self.error
        return self._candidates(Family.IPV6, self.ipv6)


def endpoints(*urls: str, family: Optional[Family] = None, timeout: float = 5.0) -> List[Endpoint]:
    return [Endpoint(url=url, family=family, timeout=timeout) for url in urls]


@pytest.fixture
def abc_addresses():
    return [ipaddress.ip_address("10.0.0.1"), ipaddress.ip_address("10.0.0.2"), ipaddress.ip_address("10.0.0.3")]
