"""Contract of the language client connection the features run on.

The connection itself (process management, framing, the initialize
handshake) belongs to the host platform.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LanguageClient(Protocol):
    """One live connection to a language server for a single language."""

    @property
    def language_id(self) -> str: ...

    async def send_request(self, method: str, params: dict[str, Any]) -> Any:
        """Send a request and return the decoded JSON result.

        Failures (error responses, timeouts, closed connections) are raised
        and reach the hierarchy callers unchanged. Cancelling the awaiting
        task is the only way to abandon a request.
        """
        ...
