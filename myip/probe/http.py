# myip/probe/http.py

import asyncio
import socket
from typing import Any, Dict, Optional

import aiohttp
from yarl import URL

from myip.config import RESPONSE_BYTE_BUDGET
from myip.core.address import classify_family, parse_address
from myip.core.errors import AddressParseError
from myip.core.models import Endpoint, Family, ProbeOutcome
from myip.core.registry import myip
from .base import ProbePlugin

_SOCKET_FAMILIES: Dict[Optional[Family], int] = {
    None: 0,
    Family.IPV4: socket.AF_INET,
    Family.IPV6: socket.AF_INET6,
}


@myip(kind="probe", name="http")
class HttpProbe(ProbePlugin):
    """
    Asks a plain text "what is my IP" service over HTTP(S).

    The connection is pinned to the endpoint's family, so the same service can be
    asked once over IPv4 and once over IPv6. Certificates are not verified by default:
    the only thing read from the response is a short address literal.
    """

    version = "0.1.0"
    description = "Fetches the caller's address from a plain text HTTP echo service."

    byte_budget: int
    verify_ssl: bool

    def __init__(self, byte_budget: int = RESPONSE_BYTE_BUDGET, verify_ssl: bool = False, **kwargs: Any):
        super().__init__(**kwargs)
        if byte_budget < 1:
            raise ValueError(f"byte_budget must be positive, got {byte_budget}")
        self.byte_budget = byte_budget
        self.verify_ssl = verify_ssl

    def _connector(self, endpoint: Endpoint) -> aiohttp.TCPConnector:
        return aiohttp.TCPConnector(
            family=_SOCKET_FAMILIES[endpoint.family],
            ssl=self.verify_ssl,
        )

    async def _read_body(self, response: aiohttp.ClientResponse) -> bytes:
        body = b""
        while len(body) < self.byte_budget:
            chunk = await response.content.read(self.byte_budget - len(body))
            if not chunk:
                break
            body += chunk
        return body

    def _unreachable_host(self, endpoint: Endpoint) -> Optional[str]:
        """A literal host of the other family can never be reached over a pinned transport."""
        if endpoint.family is None:
            return None
        host = URL(endpoint.url).host
        try:
            address = parse_address(host or "")
        except AddressParseError:
            return None
        if classify_family(address) is endpoint.family:
            return None
        return f"{address} cannot be reached over {endpoint.family.label}"

    async def probe(self, endpoint: Endpoint, **kwargs: Any) -> ProbeOutcome:
        unreachable = self._unreachable_host(endpoint)
        if unreachable:
            return self._failure(endpoint, unreachable)

        timeout = aiohttp.ClientTimeout(total=endpoint.timeout)
        try:
            async with aiohttp.ClientSession(connector=self._connector(endpoint), timeout=timeout) as session:
                async with session.get(endpoint.url) as response:
                    if response.status >= 400:
                        return self._failure(endpoint, f"HTTP {response.status}")
                    body = await self._read_body(response)
        except asyncio.TimeoutError:
            return self._failure(endpoint, f"timed out after {endpoint.timeout:g}s")
        except (aiohttp.ClientError, OSError) as e:
            return self._failure(endpoint, str(e) or e.__class__.__name__)
        except Exception as e:
            # the connector may fail with errors outside its documented ones
            return self._failure(endpoint, f"{e.__class__.__name__}: {e}")

        content = body.decode("utf-8", errors="replace").strip()
        if not content:
            return self._failure(endpoint, "empty response")

        try:
            address = parse_address(content)
        except AddressParseError as e:
            return self._failure(endpoint, str(e))

        return self._success(endpoint, address)
