# myip/source/base.py
from abc import abstractmethod
from typing import Any, Optional

from myip.core.models import CandidateSet, Family, Origin, ResolverConfig
from myip.core.plugin import BasePlugin


class AddressSource(BasePlugin):
    """
    Produces candidate addresses of one family.
    Local and remote sources expose the same pair of operations so callers never
    need to know which one they are talking to.
    """
    origin: Origin

    @classmethod
    def from_config(cls, config: ResolverConfig, **kwargs: Any) -> "AddressSource":
        """Builds the source from the run configuration."""
        return cls(**kwargs)

    @abstractmethod
    def get_ipv4_addresses(self) -> CandidateSet:
        ...

    @abstractmethod
    def get_ipv6_addresses(self) -> CandidateSet:
        ...

    def get_addresses(self, family: Family) -> CandidateSet:
        if family is Family.IPV4:
            return self.get_ipv4_addresses()
        return self.get_ipv6_addresses()

    def _candidates(self, family: Family, addresses: Optional[list] = None) -> CandidateSet:
        return CandidateSet(family=family, origin=self.origin, addresses=list(addresses or []))
