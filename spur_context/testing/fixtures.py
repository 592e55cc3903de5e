"""
Prebuilt IpContext values for common scenarios.

Some of these use risk and behavior tokens that are not part of the known
vocabularies ("ANONYMOUS", "PROXY_USER", ...); they decode to fallback
variants, exactly as unrecognised tokens from the live API would.
"""

from typing import Union

from spur_context.core.config import settings
from spur_context.schemas.context import IpContext
from spur_context.services.codec import decode, encode
from spur_context.testing.builders import IpContextBuilder


def residential_ip() -> IpContext:
    """Typical home connection, no risk factors."""
    return (
        IpContextBuilder()
        .ip("203.0.113.1")
        .infrastructure("RESIDENTIAL")
        .asn(7922, "Comcast Cable")
        .location("US", "Philadelphia")
        .client(1, 1)
        .client_types(["DESKTOP"])
        .build()
    )


def mobile_ip() -> IpContext:
    return (
        IpContextBuilder()
        .ip("203.0.113.2")
        .infrastructure("MOBILE")
        .asn(310, "T-Mobile USA")
        .location("US", "Los Angeles")
        .client(50, 1)
        .client_types(["MOBILE"])
        .build()
    )


def datacenter_ip() -> IpContext:
    """Cloud instance without specific risk indicators."""
    return (
        IpContextBuilder()
        .ip("198.51.100.1")
        .infrastructure("DATACENTER")
        .asn(16509, "Amazon Data Services")
        .location("US", "Ashburn")
        .organization("AWS")
        .build()
    )


def vpn_ip() -> IpContext:
    return (
        IpContextBuilder()
        .ip("89.39.106.191")
        .infrastructure("DATACENTER")
        .asn(49981, "WorldStream")
        .location("NL", "Amsterdam")
        .vpn("NordVPN")
        .add_risk("ANONYMOUS")
        .add_service("OPENVPN")
        .build()
    )


def tor_exit_node() -> IpContext:
    return (
        IpContextBuilder()
        .ip("185.220.101.1")
        .infrastructure("DATACENTER")
        .asn(60729, "Tor Exit")
        .location("DE", "Frankfurt")
        .tor()
        .add_risk("ANONYMOUS")
        .add_risk("TOR_EXIT")
        .build()
    )


def proxy_ip() -> IpContext:
    """Proxy service IP shared by many clients."""
    return (
        IpContextBuilder()
        .ip("45.33.32.156")
        .infrastructure("DATACENTER")
        .asn(63949, "Linode")
        .proxy("Bright Data")
        .client(100, 15)
        .client_behaviors(["PROXY_USER"])
        .add_risk("PROXY")
        .build()
    )


def ai_scraper_ip() -> IpContext:
    return (
        IpContextBuilder()
        .ip("20.15.240.0")
        .infrastructure("DATACENTER")
        .asn(8075, "Microsoft Corporation")
        .organization("OpenAI")
        .ai_scraper(True)
        .ai_services(["OPENAI", "CHATGPT"])
        .add_risk("AI_SCRAPER")
        .build()
    )


def residential_proxy_ip() -> IpContext:
    """Home connection enrolled in a residential proxy network."""
    return (
        IpContextBuilder()
        .ip("73.231.45.12")
        .infrastructure("RESIDENTIAL")
        .asn(7922, "Comcast Cable")
        .location("US", "Seattle")
        .client(200, 45)
        .client_behaviors(["FILE_SHARING", "TOR_PROXY_USER"])
        .concentration("RU", "Moscow", 0.85)
        .add_risk("RESIDENTIAL_PROXY")
        .build()
    )


def corporate_ip() -> IpContext:
    return (
        IpContextBuilder()
        .ip("17.253.144.10")
        .infrastructure("BUSINESS")
        .asn(714, "Apple Inc")
        .location("US", "Cupertino")
        .organization("Apple Inc")
        .client(1, 1)
        .client_types(["DESKTOP"])
        .build()
    )


def high_risk_ip() -> IpContext:
    """Several tunnels and risk factors at once."""
    return (
        IpContextBuilder()
        .ip("5.188.206.1")
        .infrastructure("DATACENTER")
        .asn(49505, "Selectel")
        .location("RU", "Moscow")
        .vpn("Unknown VPN")
        .proxy("Luminati")
        .risks(["ANONYMOUS", "SPAM", "SCAN", "ATTACK", "MALWARE"])
        .client(500, 80)
        .client_behaviors(["SPAM", "SCAN", "ATTACK"])
        .build()
    )


ALL_FIXTURES = (
    residential_ip,
    mobile_ip,
    datacenter_ip,
    vpn_ip,
    tor_exit_node,
    proxy_ip,
    ai_scraper_ip,
    residential_proxy_ip,
    corporate_ip,
    high_risk_ip,
)


def to_json(context: IpContext) -> str:
    """Pretty JSON (settings.JSON_INDENT) for mocks and debugging."""
    return encode(context, indent=settings.JSON_INDENT)


def from_json(json_text: Union[str, bytes]) -> IpContext:
    return decode(IpContext, json_text)
