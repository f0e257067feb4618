import json
from typing import Any, TypeVar

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from cashramp.domain.errors import DecodeError, RequestFailedError
from cashramp.domain.interfaces import IRequestSender

T = TypeVar("T")


def send_request_typed(
    client: IRequestSender,
    result_type: type[T],
    name: str,
    query: str,
    variables: Any = None,
) -> T | None:
    """Send a request and decode the ``name`` field into ``result_type``.

    The untyped result is re-encoded to JSON and validated by a pydantic
    ``TypeAdapter`` in strict mode, so any model, list of models or scalar
    works as a target and no value is coerced across types ("yes" is not a
    bool, "1.5" is not a float). A missing or null field decodes to ``None``.

    Raises:
        TransportError: propagated unchanged from ``client.send_request``.
        RequestFailedError: on a GraphQL error or a non-200 status.
        DecodeError: if the result does not validate against ``result_type``.
    """
    response = client.send_request(name, query, variables)
    if not response.success:
        raise RequestFailedError(response)

    if response.result is None:
        return None

    raw = json.dumps(response.result)
    try:
        return TypeAdapter(result_type).validate_json(raw, strict=True)
    except ValidationError as exc:
        logger.error(f"[Cashramp] {name} result does not match {result_type}: {exc}")
        raise DecodeError(f"could not decode {name} result: {exc}") from exc
