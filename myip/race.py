# myip/race.py
"""
First-answer-wins race over redundant remote IP providers.

All probes are started at once and their outcomes are consumed in arrival
order. The first successful outcome is returned; losing probes are cancelled
and whatever they would have produced is discarded.
"""
import asyncio
import logging
from typing import Iterable, List, Optional

from myip.config import DEFAULT_PROBE, DEFAULT_RACE_TIMEOUT
from myip.core.errors import AllProvidersFailedError, NoProvidersError, RaceTimeoutError
from myip.core.models import Endpoint, IPAddress, ProbeFailure, ProbeOutcome
from myip.core.registry import get_plugin
from myip.probe import ProbePlugin

logger = logging.getLogger(__name__)


class RemoteRace:
    probe: ProbePlugin

    def __init__(self, probe: Optional[ProbePlugin] = None):
        self.probe = probe if probe is not None else get_plugin("probe", DEFAULT_PROBE)()

    async def _run_probe(self, endpoint: Endpoint, outcomes: "asyncio.Queue[ProbeOutcome]") -> None:
        try:
            outcome = await self.probe.probe(endpoint)
        except Exception as e:
            logger.error(f"Probe {self.probe.name} crashed on {endpoint.url}: {e}", exc_info=True)
            outcome = ProbeFailure(endpoint=endpoint, reason=f"{endpoint.url}: {e}")
        outcomes.put_nowait(outcome)

    async def race(self, endpoints: Iterable[Endpoint], overall_timeout: float = DEFAULT_RACE_TIMEOUT) -> IPAddress:
        """
        Returns the first address produced by any of the endpoints.

        Raises:
            NoProvidersError: if `endpoints` is empty.
            AllProvidersFailedError: if every probe failed before one succeeded.
            RaceTimeoutError: if nothing succeeded within `overall_timeout` seconds.
        """
        endpoints = list(endpoints)
        if not endpoints:
            raise NoProvidersError()
        if overall_timeout <= 0:
            raise ValueError(f"overall_timeout must be positive, got {overall_timeout}")

        outcomes: "asyncio.Queue[ProbeOutcome]" = asyncio.Queue()
        tasks = [asyncio.create_task(self._run_probe(endpoint, outcomes)) for endpoint in endpoints]
        logger.debug(f"Racing {len(tasks)} providers with a {overall_timeout:g}s budget")

        loop = asyncio.get_running_loop()
        deadline = loop.time() + overall_timeout
        reasons: List[str] = []
        try:
            while len(reasons) < len(tasks):
                remaining = deadline - loop.time()
                if remaining <= 0:
                    raise RaceTimeoutError(overall_timeout)
                try:
                    outcome = await asyncio.wait_for(outcomes.get(), timeout=remaining)
                except asyncio.TimeoutError:
                    raise RaceTimeoutError(overall_timeout) from None

                if outcome.ok:
                    logger.info(f"{outcome.endpoint.url} won the race with {outcome.address}")
                    return outcome.address
                reasons.append(outcome.reason)

            raise AllProvidersFailedError(reasons)
        finally:
            for task in tasks:
                if not task.done():
                    task.cancel()
