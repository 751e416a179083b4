from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal

from .schema_access import Enclosing
from .types import ErrorEntry, ErrorGroup

if TYPE_CHECKING:
    from .dispatcher import ValidationRun

logger = logging.getLogger(__name__)

CombinatorKind = Literal["oneOf", "anyOf", "allOf"]
COMBINATORS: tuple[CombinatorKind, ...] = ("oneOf", "anyOf", "allOf")


@dataclass(slots=True)
class Tally:
    valid: int = 0
    invalid: int = 0
    matched: list[str] = field(default_factory=list)


def _discriminate(
    value: Any,
    schema: dict[str, Any],
    discriminator: dict[str, Any],
    path: str,
    suberrors: list[ErrorEntry],
    run: ValidationRun,
    parent: Enclosing | None,
) -> Tally:
    prop = run.accessor.get(discriminator, "propertyName")
    selector = value.get(prop) if isinstance(value, dict) else None
    if selector is None:
        suberrors.append(f"Discriminator {path}[{prop}] missing, oneOf validation can't continue")
        logger.debug("Left oneOf validation at %s (discriminator '%s' missing)", path, prop)
        return Tally(valid=0, invalid=1)

    key = selector if isinstance(selector, str) else str(selector)
    branch_path = f"{path}{{{prop}={key}}}"
    # Without an explicit mapping entry the value names the component itself.
    target = (run.accessor.get(discriminator, "mapping") or {}).get(key, key)
    subschema = run.accessor.resolve(target)

    group = ErrorGroup(key=key)
    suberrors.append(group)
    if run.validate(value, subschema, branch_path, group.errors, Enclosing(schema, parent)):
        logger.debug("Left oneOf validation at %s (success)", branch_path)
        return Tally(valid=1, invalid=0, matched=[key])
    logger.debug("Left oneOf validation at %s (fail)", branch_path)
    return Tally(valid=0, invalid=1)


def evaluate(
    value: Any,
    schema: dict[str, Any],
    kind: CombinatorKind,
    path: str,
    suberrors: list[ErrorEntry],
    run: ValidationRun,
    parent: Enclosing | None = None,
) -> Tally:
    """Validate ``value`` against each subschema of ``schema[kind]`` and count the outcomes."""
    logger.debug("Entering %s validation at %s", kind, path)
    get = run.accessor.get

    discriminator = get(schema, "discriminator")
    if kind == "oneOf" and discriminator and get(discriminator, "propertyName") is not None:
        return _discriminate(value, schema, discriminator, path, suberrors, run, parent)

    tally = Tally()
    enclosing = Enclosing(schema, parent)
    for idx, subschema in enumerate(get(schema, kind) or []):
        # The list entries are plain strings here; only discriminator branches are grouped.
        branch_errors: list[str] = []
        if run.validate(value, subschema, f"{path}{{sub:{idx}}}", branch_errors, enclosing):
            description = get(subschema, "description")
            tally.matched.append(f'"{description}"' if description is not None else f"Index {idx}")
            tally.valid += 1
        else:
            tally.invalid += 1
        suberrors.extend(branch_errors)

    logger.debug("Left %s validation at %s (%d valid, %d invalid)", kind, path, tally.valid, tally.invalid)
    return tally
