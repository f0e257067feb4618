import json
from typing import Any

import httpx
from loguru import logger
from pydantic import TypeAdapter, ValidationError

from cashramp.domain.errors import ConfigError, TransportError
from cashramp.domain.response import CashrampResponse, GraphQLEnvelope
from cashramp.shared.decorators import log_errors
from cashramp.shared.settings import CashrampSettings

HOST = "api.useaccrue.com"

API_URLS: dict[str, str] = {
    "test": f"https://staging.{HOST}/cashramp/api/graphql",
    "live": f"https://{HOST}/cashramp/api/graphql",
}

# A bare JSON ``null`` body decodes to an empty envelope.
_ENVELOPE = TypeAdapter(GraphQLEnvelope | None)


class CashrampClient:
    """Sends GraphQL documents to the Cashramp API over a shared ``httpx.Client``.

    Holds only construction-time configuration, so one instance can serve any
    number of calls. ``close()`` (or leaving a ``with`` block) closes the
    ``httpx.Client`` only when this instance created it.
    """

    def __init__(
        self,
        api_url: str,
        secret_key: str,
        http_client: httpx.Client,
        owns_http_client: bool = False,
    ) -> None:
        self._api_url = api_url
        self._http_client = http_client
        self._owns_http_client = owns_http_client
        self._headers = {
            "Authorization": f"Bearer {secret_key}",
            "Content-Type": "application/json",
        }

    @property
    def api_url(self) -> str:
        return self._api_url

    def close(self) -> None:
        if self._owns_http_client:
            self._http_client.close()

    def __enter__(self) -> "CashrampClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @log_errors
    def send_request(
        self, name: str, query: str, variables: Any = None
    ) -> CashrampResponse:
        """POST ``query`` and unwrap the ``data[name]`` field.

        GraphQL errors and non-200 statuses come back as a failed
        ``CashrampResponse``; they are not raised.

        Raises:
            TransportError: if the body cannot be serialized (including NaN
                or infinite floats), the request fails at the network level,
                or a 200 body is not a GraphQL envelope (``exc.response``
                then holds the decode failure).
        """
        try:
            body = json.dumps(
                {"query": query, "variables": variables},
                separators=(",", ":"),
                allow_nan=False,
            )
        except (TypeError, ValueError) as exc:
            raise TransportError(f"could not serialize {name} request: {exc}") from exc

        logger.debug(f"[Cashramp] POST {name}")
        try:
            response = self._http_client.post(self._api_url, headers=self._headers, content=body)
        except httpx.HTTPError as exc:
            raise TransportError(f"{name} request failed: {exc}") from exc
        logger.debug(f"[Cashramp] {name} responded {response.status_code}")

        if response.status_code != httpx.codes.OK:
            status_line = f"{response.status_code} {response.reason_phrase}"
            logger.warning(f"[Cashramp] {name} returned {status_line}")
            return CashrampResponse.http_failure(status_line)

        try:
            envelope = _ENVELOPE.validate_json(response.content) or GraphQLEnvelope()
        except ValidationError as exc:
            failed = CashrampResponse.decode_failure(str(exc))
            raise TransportError(f"invalid {name} response body: {exc}", response=failed) from exc

        if envelope.errors:
            message = envelope.errors[0].message
            logger.warning(f"[Cashramp] {name} GraphQL error: {message}")
            return CashrampResponse.graphql_failure(message)

        # A missing key is reported as an empty success, not a failure.
        return CashrampResponse.ok((envelope.data or {}).get(name))


def initialise_client(
    environment: str = "",
    secret_key: str = "",
    http_client: httpx.Client | None = None,
    settings: CashrampSettings | None = None,
) -> CashrampClient:
    """Build a client for ``environment`` ("test" or "live").

    Empty arguments fall back to ``CASHRAMP_ENV`` and ``CASHRAMP_SECRET_KEY``,
    read once here. No request is made. Without ``http_client`` a new
    ``httpx.Client`` is created and owned by the returned client.

    Raises:
        ConfigError: on an unknown environment or a missing secret key.
    """
    if not environment or not secret_key:
        settings = settings or CashrampSettings()
        environment = environment or settings.env
        secret_key = secret_key or settings.secret_key

    api_url = API_URLS.get(environment)
    if api_url is None:
        raise ConfigError(f'{environment} is not a valid env. Can either be "test" or "live"')

    if not secret_key:
        raise ConfigError("please provide your API secret key")

    if http_client is None:
        return CashrampClient(api_url, secret_key, httpx.Client(), owns_http_client=True)
    return CashrampClient(api_url, secret_key, http_client)
