"""
schemas/common.py
------------------

Shapes shared by every endpoint: the error body returned on failures
and the paginated envelope used by list endpoints.
"""

from __future__ import annotations

from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr

T = TypeVar("T")


class ApiErrorBody(BaseModel):
    """Body of a non-2xx response.

    Strict types: a body that does not carry exactly these fields is
    treated as malformed and replaced by a synthesized error.
    """

    status: StrictInt
    message: StrictStr
    type: StrictStr
    errors: List[StrictStr]


class PaginatedResponse(BaseModel, Generic[T]):
    items: List[T]
    page: int
    pageSize: int
    totalCount: int
    hasNextPage: bool
    hasPreviousPage: bool

    model_config = ConfigDict(extra="allow")
