# myip/core/__init__.py
from .errors import MyIPError
from .models import CandidateSet, Endpoint, Family, Origin, ResolverConfig, SelectionKind, SelectionSpec

__all__ = [
    "MyIPError",
    "CandidateSet",
    "Endpoint",
    "Family",
    "Origin",
    "ResolverConfig",
    "SelectionKind",
    "SelectionSpec",
]
