"""Typed domain errors for the Land Router.

All errors inherit from LandRouterError and can optionally wrap a
root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class NoRouteKind(Enum):
    """Why a route query could not be answered."""

    UNKNOWN_COUNTRY = "unknown_country"
    NO_PATH = "no_path"


@dataclass
class LandRouterError(Exception):
    """Base error for the land router domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class NoRouteError(LandRouterError):
    """A route query was rejected.

    The route finder returns this as a value; adapters and services
    raise it. The message always names the offending code(s) so it can
    be relayed to a client verbatim.

    Attributes:
        kind: UNKNOWN_COUNTRY or NO_PATH
        origin: Origin country code of the query
        destination: Destination country code of the query
        code: The unknown code, for UNKNOWN_COUNTRY
    """

    kind: NoRouteKind = NoRouteKind.NO_PATH
    origin: str = ""
    destination: str = ""
    code: Optional[str] = None

    @classmethod
    def unknown_country(cls, code: str, origin: str, destination: str) -> NoRouteError:
        return cls(
            f"Unknown country code: '{code}'",
            kind=NoRouteKind.UNKNOWN_COUNTRY,
            origin=origin,
            destination=destination,
            code=code,
        )

    @classmethod
    def no_path(cls, origin: str, destination: str) -> NoRouteError:
        return cls(
            f"No land route found from '{origin}' to '{destination}'",
            kind=NoRouteKind.NO_PATH,
            origin=origin,
            destination=destination,
        )


@dataclass
class CountryDataError(LandRouterError):
    """Country data could not be fetched or parsed.

    Attributes:
        source: URL or file path the data was read from
    """

    source: Optional[str] = None


@dataclass
class ConfigurationError(LandRouterError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
