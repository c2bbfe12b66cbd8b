# myip/resolver.py
import logging
from typing import List, Optional, Union

from myip.core.errors import NoAddressesError
from myip.core.models import Family, IPAddress, ResolverConfig, SelectionSpec
from myip.core.registry import get_plugin
from myip.selection import select
from myip.source import AddressSource

logger = logging.getLogger(__name__)


def resolve(source: AddressSource, family: Family, selection: Union[SelectionSpec, str]) -> List[IPAddress]:
    """
    Fetches the candidates of `family` from `source` and applies `selection`.
    An empty candidate set is an error here, so callers can tell it apart from a failed lookup.
    """
    candidates = source.get_addresses(family)
    if not candidates:
        raise NoAddressesError(f"No {family.label} IPs available.")

    logger.debug(f"{source.name} returned {len(candidates)} {family.label} candidates")
    return select(candidates, selection)


class Resolver:
    """Runs one lookup described by a ResolverConfig."""

    config: ResolverConfig

    def __init__(self, config: ResolverConfig, source: Optional[AddressSource] = None):
        self.config = config
        self._source = source

    @property
    def source(self) -> AddressSource:
        if self._source is None:
            source_cls = get_plugin("source", self.config.origin.value)
            self._source = source_cls.from_config(self.config)
        return self._source

    def resolve(self) -> List[IPAddress]:
        logger.info(f"Resolving {self.config.origin.value} {self.config.family.label} addresses (selection: \"{self.config.selection}\")")
        return resolve(self.source, self.config.family, self.config.selection)
