"""ABI document handling: signatures, selectors and annotation."""

from __future__ import annotations

from .annotator import CONFLICT_FIELDS_KEY, AnnotationSummary, MethodAnnotation, annotate_abi, is_callable_function
from .document import dump_abi, load_abi, parse_abi, write_abi
from .selector import ALL_HASHERS, BaseHasher, Keccak256Hasher, Sm3Hasher, format_selector, get_hasher
from .signature import canonical_signature, canonical_type

__all__ = [
    "ALL_HASHERS",
    "CONFLICT_FIELDS_KEY",
    "AnnotationSummary",
    "BaseHasher",
    "Keccak256Hasher",
    "MethodAnnotation",
    "Sm3Hasher",
    "annotate_abi",
    "canonical_signature",
    "canonical_type",
    "dump_abi",
    "format_selector",
    "get_hasher",
    "is_callable_function",
    "load_abi",
    "parse_abi",
    "write_abi",
]
