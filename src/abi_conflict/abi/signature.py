"""Canonical function signatures for selector hashing."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from ..errors import AbiFormatError

__all__ = ["canonical_signature", "canonical_type"]


def _type_of(param: Any, context: str) -> str:
    if not isinstance(param, Mapping) or not isinstance(param.get("type"), str):
        raise AbiFormatError(f"Parameter of {context} has no string 'type'")
    return param["type"]


def canonical_type(param: Mapping[str, Any], context: str = "function") -> str:
    """Render one parameter type.

    A bare ``tuple`` expands to its immediate components. Nested tuples and
    tuple arrays are left as declared.
    """
    declared = _type_of(param, context)
    if declared != "tuple":
        return declared
    components = param.get("components")
    if not isinstance(components, Sequence) or isinstance(components, str):
        raise AbiFormatError(f"Tuple parameter of {context} has no 'components' list")
    return "(" + ",".join(_type_of(component, context) for component in components) + ")"


def canonical_signature(name: str, inputs: Sequence[Mapping[str, Any]] | None) -> str:
    """Build ``name(type1,type2,...)`` with no whitespace."""
    params = inputs or ()
    return f"{name}(" + ",".join(canonical_type(param, name) for param in params) + ")"
