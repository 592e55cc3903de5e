from typing import Any

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer


class SpurModel(BaseModel):
    """
    Base for every Spur API record.

    The API omits any field whose value is null, so records are immutable
    snapshots where a missing key, an explicit null and an unset attribute
    all mean the same thing. Serialization writes wire names and leaves
    absent fields out instead of emitting nulls.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        serialize_by_alias=True,
    )

    @model_serializer(mode="wrap")
    def _omit_absent(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        return {key: value for key, value in data.items() if value is not None}
