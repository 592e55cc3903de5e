# spur_context/schemas/monocle.py
from pydantic import Field, StrictBool, StrictStr

from spur_context.schemas.base import SpurModel


class Assessment(SpurModel):
    """
    Decrypted Monocle assessment.

    Monocle is Spur's client-side snippet that passively flags VPN, proxy and
    residential-proxy traffic; its encrypted bundle is decrypted by the
    Monocle Decryption API (POST https://decrypt.mcl.spur.us/api/v1/assessment),
    which returns this payload. Unlike the Context API every field is required.
    """

    vpn: StrictBool = Field(description="Connected through a known VPN service")
    proxied: StrictBool = Field(description="Connected through a proxy service")
    anon: StrictBool = Field(description="Combined anonymization indicator")
    ip: StrictStr = Field(description="IP address observed for this assessment")
    ts: StrictStr = Field(description="ISO 8601 timestamp, e.g. 2022-12-01T01:00:50Z")
    complete: StrictBool = Field(description="False if the assessment did not finish")
    id: StrictStr = Field(description="Assessment UUID")
    sid: StrictStr = Field(description="Session id configured in the Monocle integration")

    @property
    def is_anonymized(self) -> bool:
        return self.vpn or self.proxied or self.anon

    @property
    def is_trustworthy(self) -> bool:
        # incomplete assessments may carry partial results
        return self.complete
