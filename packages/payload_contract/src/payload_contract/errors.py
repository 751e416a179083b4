from __future__ import annotations


class PayloadContractError(RuntimeError):
    pass


class SchemaAuthoringError(PayloadContractError):
    """The schema itself is broken; validation of the document cannot continue."""


class UnresolvedReferenceError(SchemaAuthoringError):
    def __init__(self, ref: object) -> None:
        self.ref = ref
        super().__init__(f"Referenced component {ref!r} not found")


class ReferenceCycleError(SchemaAuthoringError):
    def __init__(self, chain: list[str]) -> None:
        self.chain = chain
        super().__init__(f"Reference cycle detected: {' -> '.join(chain)}")


class InvalidPatternError(SchemaAuthoringError):
    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")


class SchemaDepthExceededError(SchemaAuthoringError):
    def __init__(self, path: str, limit: int) -> None:
        self.path = path
        self.limit = limit
        super().__init__(f"Schema nesting deeper than {limit} levels at {path}")


class InvalidKeywordError(SchemaAuthoringError):
    def __init__(self, keyword: str, value: object, path: str, reason: str) -> None:
        self.keyword = keyword
        self.value = value
        super().__init__(f"Invalid {keyword} {value!r} at {path}: {reason}")
