from spur_context.schemas.context import (
    Ai,
    AutonomousSystem,
    Client,
    Concentration,
    IpContext,
    Location,
    Tunnel,
    TunnelEntry,
)
from spur_context.schemas.enums import (
    Behavior,
    DeviceType,
    Infrastructure,
    Risk,
    Service,
    TunnelType,
)
from spur_context.schemas.metadata import TagMetadata, TagMetrics
from spur_context.schemas.monocle import Assessment
from spur_context.schemas.status import ApiStatus
