"""QStash API client."""

import httpx

from .config import Settings, get_settings
from .http import HttpClient
from .resources import (
    DeadLetterQueue,
    Events,
    Llm,
    Messages,
    Queues,
    Schedules,
    SigningKeys,
    UrlGroups,
)


class QStashClient:
    """
    Async client for the QStash REST API.

    Calls are grouped by resource::

        async with QStashClient(token="...") as client:
            await client.messages.publish_json("https://example.com/hook", {"id": 1})
            queues = await client.queues.list()

    Arguments left as ``None`` are read from :class:`Settings`
    (``QSTASH_TOKEN``, ``QSTASH_URL``, ``QSTASH_TIMEOUT_SECONDS``).
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = settings or get_settings()

        self.http = HttpClient(
            base_url=base_url or settings.url,
            token=token if token is not None else settings.token.get_secret_value(),
            timeout=timeout if timeout is not None else settings.timeout_seconds,
            transport=transport,
        )

        self.messages = Messages(self.http)
        self.queues = Queues(self.http)
        self.schedules = Schedules(self.http)
        self.url_groups = UrlGroups(self.http)
        self.signing_keys = SigningKeys(self.http)
        self.events = Events(self.http)
        self.dlq = DeadLetterQueue(self.http)
        self.llm = Llm(self.http)

    @property
    def base_url(self) -> str:
        return self.http.base_url

    async def close(self):
        """Close the underlying HTTP client."""
        await self.http.close()

    async def __aenter__(self) -> "QStashClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()
