# myip/core/errors.py
from typing import List, Optional


class MyIPError(Exception):
    """Base class for every error surfaced to the user."""


class AddressParseError(MyIPError, ValueError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(f'"{text}" is not a valid IP address')


class EnumerationError(MyIPError):
    """Listing the local interface addresses failed."""


class RaceError(MyIPError):
    """No remote provider produced an address."""


class NoProvidersError(RaceError):
    def __init__(self, message: str = "No remote IP providers configured."):
        super().__init__(message)


class AllProvidersFailedError(RaceError):
    def __init__(self, reasons: Optional[List[str]] = None):
        self.reasons = list(reasons or [])
        details = "; ".join(self.reasons)
        message = "All remote IP providers failed."
        if details:
            message = f"{message} ({details})"
        super().__init__(message)


class RaceTimeoutError(RaceError):
    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(f"No remote IP provider answered within {timeout:g} seconds.")


class FamilyMismatchError(MyIPError):
    """A provider answered with an address of the wrong family."""


class NoAddressesError(MyIPError):
    """The source produced no candidate addresses."""


class SelectionError(MyIPError):
    """The selection expression is invalid for the given candidates."""


class UnknownSourceError(MyIPError, KeyError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f'The action "{self.name}" does not exist.'
