from typing import Optional

from pydantic import ConfigDict, Field, StrictStr
from pydantic.alias_generators import to_camel

from spur_context.schemas.base import SpurModel


class TagMetrics(SpurModel):
    """
    Statistics for a tagged service.
    The API sends every metric as a string and they are kept that way.
    """

    model_config = ConfigDict(alias_generator=to_camel)

    average_device_count: Optional[StrictStr] = None
    churn_rate: Optional[StrictStr] = None
    distinct_asns: Optional[StrictStr] = Field(None, alias="distinctASNs")
    distinct_countries: Optional[StrictStr] = None
    distinct_ips: Optional[StrictStr] = Field(None, alias="distinctIPs")
    distinct_isps: Optional[StrictStr] = Field(None, alias="distinctISPs")


class TagMetadata(SpurModel):
    """
    Tag Metadata Object: analysis, statistics and metrics for a service tag
    such as OXYLABS_PROXY or NORD_VPN.

    The yes/no style attributes (`allowsCrypto`, `isNoLog`, ...) arrive as the
    strings "true" / "false" and are not converted.
    """

    model_config = ConfigDict(alias_generator=to_camel)

    allows_crypto: Optional[StrictStr] = None
    allows_free_access: Optional[StrictStr] = None
    allows_multihop: Optional[StrictStr] = None
    allows_torrents: Optional[StrictStr] = None
    allows_white_label: Optional[StrictStr] = None
    categories: Optional[list[StrictStr]] = None  # RESIDENTIAL_PROXY, DATACENTER_PROXY, ...
    description: Optional[StrictStr] = None
    is_anonymous: Optional[StrictStr] = None
    is_callback_proxy: Optional[StrictStr] = None
    is_enterprise: Optional[StrictStr] = None
    is_inactive: Optional[StrictStr] = None
    is_no_log: Optional[StrictStr] = None
    metrics: Optional[TagMetrics] = None
    name: Optional[StrictStr] = None
    platforms: Optional[list[StrictStr]] = None
    protocols: Optional[list[StrictStr]] = None
    tag: Optional[StrictStr] = None
    targeting_types: Optional[list[StrictStr]] = None  # CITY, STATE, COUNTRY, ASN
    website: Optional[StrictStr] = None
