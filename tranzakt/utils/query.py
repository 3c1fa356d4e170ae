"""
utils/query.py
---------------

Query-string serialization for declared parameter models.

Only parameters that carry a value are emitted, in the order the model
declares them, under their wire (alias) names.  Values are coerced the
way the API expects: booleans become ``true``/``false``, enums their
value, anything else ``str(value)``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple, Type, TypeVar, Union

import httpx
from pydantic import BaseModel

P = TypeVar("P", bound=BaseModel)


def coerce_param(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def as_params(model: Type[P], params: Union[P, Mapping[str, Any], None]) -> Optional[P]:
    """Accept either a model instance or a plain mapping of parameters."""
    if params is None or isinstance(params, model):
        return params
    return model.model_validate(dict(params))


def query_pairs(params: Optional[BaseModel]) -> List[Tuple[str, str]]:
    if params is None:
        return []
    pairs: List[Tuple[str, str]] = []
    for name, field in type(params).model_fields.items():
        value = getattr(params, name)
        if value is None:
            continue
        pairs.append((field.alias or name, coerce_param(value)))
    return pairs


def build_query(params: Optional[BaseModel]) -> str:
    """Return the encoded query string (without ``?``), possibly empty."""
    pairs = query_pairs(params)
    if not pairs:
        return ""
    return str(httpx.QueryParams(pairs))


def with_query(path: str, params: Optional[BaseModel]) -> str:
    query = build_query(params)
    return f"{path}?{query}" if query else path
