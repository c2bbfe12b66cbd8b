# myip/probe/__init__.py
from .base import ProbePlugin

# Import the concrete probes to register them
from .http import HttpProbe

__all__ = [
    "ProbePlugin",
    "HttpProbe",
]
