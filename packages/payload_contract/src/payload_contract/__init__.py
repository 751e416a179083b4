from .callbacks import ROOT_MARKER, callback_template, register_callback
from .canonical_json import canonical_json_dumps, canonicalize, decode, same_value
from .combinators import Tally, evaluate
from .config import ValidatorSettings
from .dispatcher import ValidationRun, flatten_suberrors
from .errors import (
    InvalidKeywordError,
    InvalidPatternError,
    PayloadContractError,
    ReferenceCycleError,
    SchemaAuthoringError,
    SchemaDepthExceededError,
    UnresolvedReferenceError,
)
from .logging_config import setup_logging
from .patterns import matches
from .schema_access import Enclosing, SchemaAccessor
from .types import (
    ContextKind,
    ErrorGroup,
    SchemaKind,
    ValidationContext,
    ValidationResult,
)
from .validator import PayloadValidator, validate_raw_json

__all__ = [
    "ROOT_MARKER",
    "ContextKind",
    "SchemaKind",
    "ValidationContext",
    "ValidationResult",
    "ErrorGroup",
    "ValidatorSettings",
    "PayloadValidator",
    "ValidationRun",
    "SchemaAccessor",
    "Enclosing",
    "Tally",
    "PayloadContractError",
    "SchemaAuthoringError",
    "UnresolvedReferenceError",
    "ReferenceCycleError",
    "InvalidPatternError",
    "InvalidKeywordError",
    "SchemaDepthExceededError",
    "decode",
    "canonicalize",
    "canonical_json_dumps",
    "same_value",
    "matches",
    "callback_template",
    "register_callback",
    "evaluate",
    "flatten_suberrors",
    "setup_logging",
    "validate_raw_json",
]
