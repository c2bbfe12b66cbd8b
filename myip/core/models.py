# myip/core/models.py
import enum
import ipaddress
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from myip.config import (
    DEFAULT_IPV4_URLS,
    DEFAULT_IPV6_URLS,
    DEFAULT_PROBE_TIMEOUT,
    DEFAULT_RACE_TIMEOUT,
    DEFAULT_SELECTION,
)

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


class Family(str, enum.Enum):
    """IP address family."""
    IPV4 = "ipv4"
    IPV6 = "ipv6"

    @property
    def label(self) -> str:
        return "IPv4" if self is Family.IPV4 else "IPv6"


class Origin(str, enum.Enum):
    """Where candidate addresses come from."""
    LOCAL = "local"
    REMOTE = "remote"


class Endpoint(BaseModel):
    """
    A single remote "what is my IP" service.
    When `family` is set, the connection is only allowed to use routes of that family.
    """
    model_config = ConfigDict(frozen=True)

    url: str
    family: Optional[Family] = None
    timeout: float = Field(default=5.0, gt=0)


class ProbeSuccess(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    ok: Literal[True] = True
    endpoint: Endpoint
    address: IPAddress


class ProbeFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    ok: Literal[False] = False
    endpoint: Endpoint
    reason: str


ProbeOutcome = Union[ProbeSuccess, ProbeFailure]


class SelectionKind(str, enum.Enum):
    ALL = "all"
    FIRST = "first"
    LAST = "last"
    INDEX = "index"


class SelectionSpec(BaseModel):
    """Parsed form of a selection expression such as "all", "last" or "3,1"."""
    model_config = ConfigDict(frozen=True)

    kind: SelectionKind = SelectionKind.ALL
    indices: List[int] = Field(default_factory=list)
    raw: str = DEFAULT_SELECTION

    @field_validator("indices")
    @classmethod
    def _non_negative(cls, value: List[int]) -> List[int]:
        if any(index < 0 for index in value):
            raise ValueError("selection indices cannot be negative")
        return value


class CandidateSet(BaseModel):
    """
    An ordered set of addresses produced by one address source for one family.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    family: Family
    origin: Origin
    addresses: List[IPAddress] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.addresses)

    def __bool__(self) -> bool:
        return bool(self.addresses)


class ResolverConfig(BaseModel):
    """Immutable run configuration, built once by the CLI."""
    model_config = ConfigDict(frozen=True)

    origin: Origin
    family: Family = Family.IPV6
    selection: str = DEFAULT_SELECTION
    race_timeout: float = Field(default=DEFAULT_RACE_TIMEOUT, gt=0)
    probe_timeout: float = Field(default=DEFAULT_PROBE_TIMEOUT, gt=0)
    ipv4_urls: List[str] = Field(default_factory=lambda: list(DEFAULT_IPV4_URLS))
    ipv6_urls: List[str] = Field(default_factory=lambda: list(DEFAULT_IPV6_URLS))

    def ipv4_endpoints(self) -> List[Endpoint]:
        return [Endpoint(url=url, family=Family.IPV4, timeout=self.probe_timeout) for url in self.ipv4_urls]

    def ipv6_endpoints(self) -> List[Endpoint]:
        return [Endpoint(url=url, family=Family.IPV6, timeout=self.probe_timeout) for url in self.ipv6_urls]
