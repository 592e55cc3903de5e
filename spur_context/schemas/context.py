# spur_context/schemas/context.py
from typing import Any, Optional

from pydantic import Field, StrictBool, StrictFloat, StrictInt, StrictStr, field_validator

from spur_context.schemas.base import SpurModel
from spur_context.schemas.enums import (
    Behavior,
    DeviceType,
    Infrastructure,
    Risk,
    Service,
    TunnelType,
)


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


class Ai(SpurModel):
    """AI activity observed from an IP address."""
    scrapers: Optional[StrictBool] = None
    bots: Optional[StrictBool] = None
    services: Optional[list[StrictStr]] = None  # e.g. OPENAI, ANTHROPIC


class AutonomousSystem(SpurModel):
    number: Optional[StrictInt] = None
    organization: Optional[StrictStr] = None


class Concentration(SpurModel):
    """Geographic concentration of the users behind an IP."""
    city: Optional[StrictStr] = None
    country: Optional[StrictStr] = None  # ISO 3166-1 alpha-2
    density: Optional[StrictFloat] = None  # 0.0 - 1.0
    geohash: Optional[StrictStr] = None
    skew: Optional[StrictInt] = None
    state: Optional[StrictStr] = None


class Client(SpurModel):
    """Descriptive data about the clients connecting from an IP."""
    behaviors: Optional[list[Behavior]] = None
    concentration: Optional[Concentration] = None
    count: Optional[StrictInt] = None
    countries: Optional[StrictInt] = None
    proxies: Optional[list[StrictStr]] = None
    spread: Optional[StrictInt] = None
    types: Optional[list[DeviceType]] = None


class Location(SpurModel):
    city: Optional[StrictStr] = None
    country: Optional[StrictStr] = None
    latitude: Optional[StrictFloat] = None
    longitude: Optional[StrictFloat] = None
    state: Optional[StrictStr] = None


class TunnelEntry(SpurModel):
    """
    Ingress point of a tunnel.
    The API sends either a bare IP string or an object with location / AS detail;
    a bare string becomes an entry with only `ip` set.
    """
    ip: Optional[StrictStr] = None
    location: Optional[Location] = None
    autonomous_system: Optional[AutonomousSystem] = Field(None, alias="as")

    @classmethod
    def from_ip(cls, ip: str) -> "TunnelEntry":
        return cls(ip=ip)


class Tunnel(SpurModel):
    """Tunneling method (VPN, proxy, Tor) in use on an IP."""
    anonymous: Optional[StrictBool] = None
    entries: Optional[list[TunnelEntry]] = None
    operator: Optional[StrictStr] = None
    tunnel_type: Optional[TunnelType] = Field(None, alias="type")

    @field_validator("entries", mode="before")
    @classmethod
    def _normalize_entries(cls, value: Any) -> Any:
        # ["1.2.3.4", ...] and [{"ip": "1.2.3.4", ...}, ...] both ship; shapes may be mixed
        if not isinstance(value, (list, tuple)):
            return value

        entries: list[Any] = []
        for index, item in enumerate(value):
            if isinstance(item, str):
                entries.append(TunnelEntry.from_ip(item))
            elif isinstance(item, (dict, TunnelEntry)):
                entries.append(item)
            else:
                raise ValueError(
                    "expected string or object in entries array, "
                    f"got {_json_type(item)} at index {index}"
                )
        return entries


class IpContext(SpurModel):
    """
    Everything known about one IP address (the Context API response).
    Any field may be omitted by the API.
    """
    ai: Optional[Ai] = None
    autonomous_system: Optional[AutonomousSystem] = Field(None, alias="as")
    client: Optional[Client] = None
    infrastructure: Optional[Infrastructure] = None
    ip: Optional[StrictStr] = None  # IPv4 or IPv6, not validated
    location: Optional[Location] = None
    organization: Optional[StrictStr] = None
    risks: Optional[list[Risk]] = None
    services: Optional[list[Service]] = None
    tunnels: Optional[list[Tunnel]] = None
