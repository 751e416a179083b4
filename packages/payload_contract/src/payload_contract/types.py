from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

SchemaNode = dict[str, Any]


class ContextKind:
    REQUEST = "request"
    RESPONSE = "response"


class SchemaKind(str, Enum):
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    NULL = "null"


class ValidationContext(BaseModel):
    """Per-call state: direction of the payload plus the callback side channel."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal["request", "response"]
    callback_spec: dict[str, dict[str, Any]] = Field(default_factory=dict)
    callback_map: dict[str, dict[str, Any]] = Field(default_factory=dict)

    @property
    def is_request(self) -> bool:
        return self.kind == ContextKind.REQUEST

    @property
    def is_response(self) -> bool:
        return self.kind == ContextKind.RESPONSE


@dataclass(frozen=True, slots=True)
class ErrorGroup:
    """Errors of one discriminator branch, reported under its key."""

    key: str
    errors: list[str] = field(default_factory=list)


ErrorEntry = str | ErrorGroup


@dataclass(slots=True)
class ValidationResult:
    valid: bool
    errors: list[str]
    fatal: bool = False
