"""Slack Web API client using aiohttp."""

from typing import Optional

import aiohttp

from livebot.config import CONFIG
from livebot.ports.outbound import PostResult

SLACK_API_BASE = "https://slack.com/api"


class SlackClient:
    """Async chat.postMessage client bound to one team's bot token."""

    def __init__(self, token: str, timeout: Optional[float] = None):
        self._token = token
        self._timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self._token)

    def _client_timeout(self) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(total=self._timeout or CONFIG["http_timeout"])

    async def post_message(
        self, channel: str, text: str, as_bot: bool = True
    ) -> PostResult:
        if not self.is_configured:
            return PostResult(success=False, channel=channel, text=text, error="Slack bot token not configured")

        url = f"{SLACK_API_BASE}/chat.postMessage"
        headers = {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json; charset=utf-8",
        }
        payload = {"channel": channel, "text": text, "as_user": as_bot}

        try:
            async with aiohttp.ClientSession(timeout=self._client_timeout()) as session:
                async with session.post(url, headers=headers, json=payload) as resp:
                    if resp.status >= 400:
                        return PostResult(
                            success=False,
                            channel=channel,
                            text=text,
                            error=f"HTTP {resp.status}",
                        )
                    data = await resp.json()
                    if not data.get("ok"):
                        return PostResult(
                            success=False,
                            channel=channel,
                            text=text,
                            error=data.get("error", str(data)),
                        )
                    return PostResult(
                        success=True,
                        ts=data.get("ts"),
                        channel=data.get("channel", channel),
                        text=text,
                    )
        except Exception as e:
            return PostResult(success=False, channel=channel, text=text, error=str(e))
