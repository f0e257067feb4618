from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict


class ResponseKind(StrEnum):
    ok = "ok"
    graphql_error = "graphql_error"
    http_error = "http_error"
    decode_error = "decode_error"


class GraphQLErrorDetail(BaseModel):
    message: str


class GraphQLEnvelope(BaseModel):
    """Top-level ``{data, errors}`` body returned by the GraphQL endpoint."""

    data: dict[str, Any] | None = None
    errors: list[GraphQLErrorDetail] | None = None


class CashrampResponse(BaseModel):
    """Outcome of a single request at the untyped tier.

    Application failures (GraphQL errors, non-200 statuses) are carried here as
    data; only ``kind == ok`` has ``success`` set.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    kind: ResponseKind
    result: Any = None
    error: str | None = None

    @classmethod
    def ok(cls, result: Any) -> "CashrampResponse":
        return cls(success=True, kind=ResponseKind.ok, result=result)

    @classmethod
    def graphql_failure(cls, message: str) -> "CashrampResponse":
        return cls(success=False, kind=ResponseKind.graphql_error, error=message)

    @classmethod
    def http_failure(cls, status_line: str) -> "CashrampResponse":
        return cls(success=False, kind=ResponseKind.http_error, error=status_line)

    @classmethod
    def decode_failure(cls, message: str) -> "CashrampResponse":
        return cls(success=False, kind=ResponseKind.decode_error, error=message)
