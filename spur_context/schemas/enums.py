# spur_context/schemas/enums.py
"""
Vocabularies used by the Context API.

Every vocabulary is open: tokens added by the API after this release decode
to a fallback variant (`.is_other`) that re-encodes to the same string.
"""

from spur_context.core.open_enum import OpenEnum


class Infrastructure(OpenEnum):
    """Type of network the IP belongs to."""

    DATACENTER = "DATACENTER"
    RESIDENTIAL = "RESIDENTIAL"
    MOBILE = "MOBILE"
    BUSINESS = "BUSINESS"


class Risk(OpenEnum):
    """Risk factors or suspicious behaviors identified for an IP."""

    TUNNEL = "TUNNEL"
    SPAM = "SPAM"
    CALLBACK_PROXY = "CALLBACK_PROXY"
    GEO_MISMATCH = "GEO_MISMATCH"


class Service(OpenEnum):
    """Network services or protocols detected on an IP."""

    OPENVPN = "OPENVPN"
    IPSEC = "IPSEC"
    WIREGUARD = "WIREGUARD"
    SSH = "SSH"
    PPTP = "PPTP"


class TunnelType(OpenEnum):
    VPN = "VPN"
    PROXY = "PROXY"
    TOR = "TOR"


class Behavior(OpenEnum):
    """Client behavior patterns observed from an IP."""

    FILE_SHARING = "FILE_SHARING"
    TOR_PROXY_USER = "TOR_PROXY_USER"


class DeviceType(OpenEnum):
    MOBILE = "MOBILE"
    DESKTOP = "DESKTOP"
