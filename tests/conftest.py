"""Shared fixtures for IEX Cloud client tests."""

import json

import pytest

from iexcloud.transport import TransportResponse


class RecordingTransport:
    """Fake transport recording requested URLs and replaying canned responses.

    Responses queued with :meth:`respond` are returned in order; once the
    queue is empty every request gets ``200 []``.
    """

    def __init__(self):
        self.urls: list[str] = []
        self._responses: list[TransportResponse] = []

    def respond(self, payload, status: int = 200) -> None:
        self._responses.append(
            TransportResponse(status=status, body=json.dumps(payload))
        )

    def respond_raw(self, body: str, status: int = 200) -> None:
        self._responses.append(TransportResponse(status=status, body=body))

    async def get(self, url: str) -> TransportResponse:
        self.urls.append(url)
        if self._responses:
            return self._responses.pop(0)
        return TransportResponse(status=200, body="[]")

    @property
    def last_url(self) -> str:
        return self.urls[-1]


@pytest.fixture
def transport() -> RecordingTransport:
    """Recording fake transport with no queued responses."""
    return RecordingTransport()
