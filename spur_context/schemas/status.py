from typing import Optional

from pydantic import ConfigDict, StrictBool, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

from spur_context.schemas.base import SpurModel


class ApiStatus(SpurModel):
    """Account status of an API token (the /status endpoint)."""

    model_config = ConfigDict(alias_generator=to_camel)

    active: Optional[StrictBool] = None
    queries_remaining: Optional[StrictInt] = None  # left in this billing cycle
    service_tier: Optional[StrictStr] = None
