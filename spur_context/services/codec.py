# spur_context/services/codec.py
from typing import Any, Optional, TypeVar, Union

from pydantic import ValidationError

from spur_context.core.errors import DecodeError
from spur_context.schemas.base import SpurModel
from spur_context.schemas.context import IpContext
from spur_context.schemas.metadata import TagMetadata
from spur_context.schemas.monocle import Assessment
from spur_context.schemas.status import ApiStatus
import logging

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=SpurModel)

Payload = Union[str, bytes, bytearray, dict[str, Any]]


def decode(model_cls: type[M], data: Payload) -> M:
    """
    Decode one API payload into `model_cls`.
    `data` is raw JSON text/bytes or an already-parsed dict.
    Keys are matched against wire names only; Python attribute names in the
    payload are unknown keys and ignored.
    Raises DecodeError; a record either decodes completely or not at all.
    """
    name = model_cls.__name__
    try:
        if isinstance(data, (str, bytes, bytearray)):
            record = model_cls.model_validate_json(data, by_alias=True, by_name=False)
        else:
            record = model_cls.model_validate(data, by_alias=True, by_name=False)
    except ValidationError as e:
        err = DecodeError.from_validation_error(name, e)
        logger.debug("Decoding %s failed at %s: %s", name, err.path or "<root>", err.message)
        raise err from e

    logger.debug("Decoded %s", name)
    return record


def encode(record: SpurModel, indent: Optional[int] = None) -> str:
    """JSON text under wire names, absent fields left out."""
    return record.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


def to_dict(record: SpurModel) -> dict[str, Any]:
    return record.model_dump(mode="json", by_alias=True, exclude_none=True)


def decode_context(data: Payload) -> IpContext:
    return decode(IpContext, data)


def decode_tag_metadata(data: Payload) -> TagMetadata:
    return decode(TagMetadata, data)


def decode_status(data: Payload) -> ApiStatus:
    return decode(ApiStatus, data)


def decode_assessment(data: Payload) -> Assessment:
    return decode(Assessment, data)
