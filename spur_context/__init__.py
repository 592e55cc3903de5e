"""
Typed models for the Spur Context API (IP context, tag metadata, token
status) and the Monocle assessment payload.

    from spur_context import decode_context, Infrastructure

    ctx = decode_context('{"ip": "89.39.106.191", "infrastructure": "DATACENTER"}')
    assert ctx.infrastructure == Infrastructure.DATACENTER
"""

from spur_context.core.errors import DecodeError
from spur_context.core.open_enum import OpenEnum
from spur_context.schemas import (
    Ai,
    ApiStatus,
    Assessment,
    AutonomousSystem,
    Behavior,
    Client,
    Concentration,
    DeviceType,
    Infrastructure,
    IpContext,
    Location,
    Risk,
    Service,
    TagMetadata,
    TagMetrics,
    Tunnel,
    TunnelEntry,
    TunnelType,
)
from spur_context.services.codec import (
    decode,
    decode_assessment,
    decode_context,
    decode_status,
    decode_tag_metadata,
    encode,
    to_dict,
)

__version__ = "0.1.0"
