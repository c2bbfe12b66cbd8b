# myip/probe/base.py
from abc import abstractmethod
from typing import Any

from myip.core.models import Endpoint, ProbeFailure, ProbeOutcome, ProbeSuccess, IPAddress
from myip.core.plugin import BasePlugin


class ProbePlugin(BasePlugin):
    """Queries one remote endpoint for the caller's address."""

    @abstractmethod
    async def probe(self, endpoint: Endpoint, **kwargs: Any) -> ProbeOutcome:
        """
        Performs one round trip against `endpoint`.
        Implementations never raise for network or parse problems; they return a ProbeFailure.
        """
        ...

    def _success(self, endpoint: Endpoint, address: IPAddress) -> ProbeSuccess:
        self.debug(f"{endpoint.url} answered with {address}")
        return ProbeSuccess(endpoint=endpoint, address=address)

    def _failure(self, endpoint: Endpoint, reason: str) -> ProbeFailure:
        self.debug(f"{endpoint.url} failed: {reason}")
        return ProbeFailure(endpoint=endpoint, reason=f"{endpoint.url}: {reason}")
