# myip/selection.py
"""
Selection of a subset of candidate addresses.

A selection expression is one of "all", "first", "last" or a comma separated
list of 1-based positions ("2", "3,1", "1,1,1"). Positions keep the order they
were given in and may repeat.
"""
import re
from typing import List, Sequence, Union

from myip.core.errors import SelectionError
from myip.core.models import CandidateSet, IPAddress, SelectionKind, SelectionSpec

SELECTION_CHOICES = [SelectionKind.ALL.value, SelectionKind.FIRST.value, SelectionKind.LAST.value, "1", "1,3"]

_INDEX_LIST_PATTERN = re.compile(r"\d+(?:,\d+)*", re.ASCII)
_KEYWORDS = {
    SelectionKind.ALL.value: SelectionKind.ALL,
    SelectionKind.FIRST.value: SelectionKind.FIRST,
    SelectionKind.LAST.value: SelectionKind.LAST,
}


def parse_selection(text: str) -> SelectionSpec:
    """
    Parses a selection expression.

    Raises:
        SelectionError: for anything that is neither a keyword nor a plain index list.
    """
    if text in _KEYWORDS:
        return SelectionSpec(kind=_KEYWORDS[text], raw=text)

    if not _INDEX_LIST_PATTERN.fullmatch(text):
        raise SelectionError(f'"{text}" is not a valid value for the IP selection')

    return SelectionSpec(kind=SelectionKind.INDEX, indices=[int(token) for token in text.split(",")], raw=text)


def select(candidates: Union[CandidateSet, Sequence[IPAddress]],
           selection: Union[SelectionSpec, str]) -> List[IPAddress]:
    """
    Projects `candidates` onto the requested subset.
    Nothing is returned unless every requested position exists.
    Without candidates only "all" (or an empty selection) is accepted.
    """
    addresses = list(candidates.addresses if isinstance(candidates, CandidateSet) else candidates)

    if not addresses:
        raw = selection.raw if isinstance(selection, SelectionSpec) else selection
        if raw in ("", SelectionKind.ALL.value):
            return []
        raise SelectionError(f'Invalid selection "{raw}". No IPs available.')

    spec = selection if isinstance(selection, SelectionSpec) else parse_selection(selection)

    if spec.kind is SelectionKind.ALL:
        return addresses
    if spec.kind is SelectionKind.FIRST:
        return addresses[:1]
    if spec.kind is SelectionKind.LAST:
        return addresses[-1:]

    for index in spec.indices:
        if index < 1 or index > len(addresses):
            raise SelectionError(f"Invalid IP selection index supplied (min: 1, max: {len(addresses)}).")

    return [addresses[index - 1] for index in spec.indices]
