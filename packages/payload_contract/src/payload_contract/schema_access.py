from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from .errors import ReferenceCycleError, UnresolvedReferenceError
from .types import SchemaNode


@dataclass(frozen=True, slots=True)
class Enclosing:
    """Link to the combinator schema a subschema is being evaluated under."""

    schema: Mapping[str, Any]
    parent: Enclosing | None = None


def component_name(ref: str) -> str:
    if ref.startswith("#/"):
        ref = ref.rsplit("/", 1)[-1].replace("~1", "/").replace("~0", "~")
    return ref


class SchemaAccessor:
    """Reads schema keywords through ``$ref`` indirection and the enclosing-schema chain."""

    def __init__(self, components: Mapping[str, SchemaNode]) -> None:
        self._components = MappingProxyType(dict(components))

    @property
    def components(self) -> Mapping[str, SchemaNode]:
        return self._components

    def resolve(self, ref: Any) -> SchemaNode:
        if not isinstance(ref, str):
            raise UnresolvedReferenceError(ref)

        chain: list[str] = []
        current = ref
        while True:
            name = component_name(current)
            if name in chain:
                raise ReferenceCycleError(chain + [name])
            chain.append(name)

            node = self._components.get(name)
            if node is None:
                raise UnresolvedReferenceError(name)
            nxt = node.get("$ref")
            if nxt is None:
                return node
            if not isinstance(nxt, str):
                raise UnresolvedReferenceError(nxt)
            current = nxt

    def get(self, schema: Mapping[str, Any] | None, keyword: str, parent: Enclosing | None = None) -> Any:
        if schema is None:
            return None

        value = schema.get(keyword)
        if value is None and schema.get("$ref") is not None:
            value = self.resolve(schema["$ref"]).get(keyword)

        if value is None and keyword == "type" and parent is not None:
            value = self.get(parent.schema, "type", parent.parent)
            if value is None:
                value = "object"
        return value
