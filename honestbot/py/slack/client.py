import asyncio

import aiohttp

from honestbot.py.util.block import impression_modal


class SlackError(Exception):
    """Base exception for failed Slack Web API calls"""


class TransportError(SlackError):
    """Exception for calls that couldn't be sent or answered (connection
    failures, timeouts)"""


class APIError(SlackError):
    """Exception for calls Slack answered with a non-200 status"""

    def __init__(self, status: int, body: str):
        super().__init__(f"slack API error ({status}): {body}")
        self.status = status
        self.body = body


class SlackClient:
    def __init__(
        self,
        token: str,
        api_url: str = "https://slack.com/api",
        timeout: float = 10.0
    ):
        self.token = token
        self.api_url = api_url.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.session: aiohttp.ClientSession = None

    def configure(self):
        self.session = aiohttp.ClientSession(timeout=self.timeout)

    async def cleanup(self):
        if self.session is not None:
            await self.session.close()

    async def _api_post(self, method: str, payload: dict) -> None:
        api_url = f"{self.api_url}/{method}"
        headers = {
            "content-type": "application/json",
            "authorization": f"Bearer {self.token}"
        }
        try:
            async with self.session.post(
                api_url,
                json=payload,
                headers=headers
            ) as rsp:
                # only the HTTP status is checked, Slack's own "ok" flag in
                # the body is not
                if rsp.status != 200:
                    raise APIError(
                        rsp.status,
                        await rsp.text(errors="replace")
                    )
        except aiohttp.ClientError as e:
            raise TransportError(f"{method} failed: {e!r}") from e
        except asyncio.TimeoutError as e:
            raise TransportError(f"{method} timed out") from e

    async def open_modal(self, trigger_id: str) -> None:
        """Open the impression modal for the user who fired `trigger_id`.

        See https://api.slack.com/methods/views.open"""
        payload = {
            "trigger_id": trigger_id,
            "view": impression_modal()
        }
        await self._api_post("views.open", payload)
