# spur_context/core/open_enum.py
from __future__ import annotations

from typing import Any, ClassVar, Optional

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


def _restore(cls: type["OpenEnum"], value: str, is_other: bool) -> "OpenEnum":
    return cls.other(value) if is_other else cls(value)


def _token(variant: "OpenEnum") -> str:
    return variant.value


class OpenEnum:
    """
    String enumeration that tolerates values it does not know about.

    Subclasses declare their known tokens as upper-case class attributes:

        class TunnelType(OpenEnum):
            VPN = "VPN"
            TOR = "TOR"

    Each declaration is replaced by a named variant. Looking up a token that
    is not declared never fails; it yields a fallback variant that carries the
    original string, so the value survives a decode/encode round trip.
    """

    __slots__ = ("_value", "_name")

    _members: ClassVar[dict[str, "OpenEnum"]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        members: dict[str, OpenEnum] = {}
        for name, token in list(vars(cls).items()):
            if name.startswith("_") or not isinstance(token, str):
                continue
            member = cls._make(token, name)
            setattr(cls, name, member)
            members[token] = member
        cls._members = members

    @classmethod
    def _make(cls, value: str, name: Optional[str]) -> "OpenEnum":
        obj = object.__new__(cls)
        object.__setattr__(obj, "_value", value)
        object.__setattr__(obj, "_name", name)
        return obj

    def __new__(cls, value: str = ""):
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise TypeError(
                f"{cls.__name__} expects a string token, got {type(value).__name__}"
            )
        member = cls._members.get(value)
        if member is not None:
            return member
        return cls._make(value, None)

    @classmethod
    def parse(cls, token: str) -> "OpenEnum":
        """Named variant for a known token, fallback variant otherwise."""
        return cls(token)

    @classmethod
    def other(cls, token: str) -> "OpenEnum":
        """Fallback variant carrying `token`, even if the token is known."""
        return cls._make(token, None)

    @classmethod
    def members(cls) -> list["OpenEnum"]:
        return list(cls._members.values())

    @property
    def value(self) -> str:
        return self._value

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def is_other(self) -> bool:
        return self._name is None

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} values are immutable")

    def __delattr__(self, key: str) -> None:
        raise AttributeError(f"{type(self).__name__} values are immutable")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value and self._name == other._name

    def __hash__(self) -> int:
        return hash((type(self), self._value, self._name))

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        if self._name is None:
            return f"{type(self).__name__}.other({self._value!r})"
        return f"{type(self).__name__}.{self._name}"

    def __reduce__(self):
        return _restore, (type(self), self._value, self.is_other)

    def __copy__(self) -> "OpenEnum":
        return self

    def __deepcopy__(self, memo: dict) -> "OpenEnum":
        return self

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        # wire values must be JSON strings; anything else is a structural error
        from_token = core_schema.no_info_after_validator_function(
            cls.parse, core_schema.str_schema(strict=True)
        )
        return core_schema.json_or_python_schema(
            json_schema=from_token,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_token]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                _token, return_schema=core_schema.str_schema()
            ),
        )
