from typing import Any, Protocol

from .response import CashrampResponse


class IRequestSender(Protocol):
    def send_request(
        self, name: str, query: str, variables: Any = None
    ) -> CashrampResponse:
        """Send one GraphQL document and return the unwrapped ``name`` field."""
        ...
