# myip/source/__init__.py
from .base import AddressSource

# Import the concrete sources to register them
from .local import LocalAddressSource, LocalEnumerator, PsutilEnumerator
from .remote import RemoteAddressSource

__all__ = [
    "AddressSource",
    "LocalAddressSource",
    "LocalEnumerator",
    "PsutilEnumerator",
    "RemoteAddressSource",
]
