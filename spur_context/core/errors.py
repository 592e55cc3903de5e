# spur_context/core/errors.py
from __future__ import annotations

from typing import Any, Optional

from pydantic import ValidationError


def _dotted(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc)


class DecodeError(ValueError):
    """
    Structural decode failure: malformed JSON, a field whose JSON type does
    not match its declaration, a missing required field, or a tunnel entry
    that is neither a string nor an object.
    """

    def __init__(
        self,
        model: str,
        message: str,
        path: Optional[str] = None,
        errors: Optional[list[dict[str, Any]]] = None,
    ) -> None:
        self.model = model
        self.message = message
        self.path = path
        self.errors = errors or []
        location = f" at '{path}'" if path else ""
        super().__init__(f"failed to decode {model}{location}: {message}")

    @classmethod
    def from_validation_error(cls, model: str, exc: ValidationError) -> "DecodeError":
        errors = [
            {"loc": _dotted(err["loc"]), "msg": err["msg"], "type": err["type"]}
            for err in exc.errors(include_url=False, include_input=False)
        ]
        first = errors[0] if errors else {"loc": "", "msg": str(exc)}
        extra = f" (+{len(errors) - 1} more)" if len(errors) > 1 else ""
        return cls(
            model=model,
            message=f"{first['msg']}{extra}",
            path=first["loc"] or None,
            errors=errors,
        )
