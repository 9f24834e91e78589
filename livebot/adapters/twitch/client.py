"""Twitch stream-status client (kraken v3) using aiohttp."""

import asyncio
from typing import Any, Dict, Optional

import aiohttp

from livebot.config import CONFIG
from livebot.domain.errors import ExternalAPIError
from livebot.domain.models import StreamStatus

TWITCH_API_BASE = "https://api.twitch.tv/kraken"
TWITCH_ACCEPT = "application/vnd.twitchtv.v3+json"


class TwitchClient:
    """Looks up whether a Twitch channel is streaming right now."""

    @property
    def is_configured(self) -> bool:
        return bool(CONFIG["twitch_client_id"])

    def _ssl(self):
        # False skips certificate checks; test setups only
        return not CONFIG["twitch_insecure_tls"]

    async def get_stream(self, channel: str = "twoeasy") -> Optional[Dict[str, Any]]:
        """Return the `stream` object for a channel, or None when offline.

        Raises:
            ExternalAPIError: transport failure, timeout, HTTP error status or
                a body that is not a JSON object.
        """
        url = f"{TWITCH_API_BASE}/streams/{channel}"
        headers = {
            "Accept": TWITCH_ACCEPT,
            "Client-ID": CONFIG["twitch_client_id"],
        }
        timeout = aiohttp.ClientTimeout(total=CONFIG["http_timeout"])

        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url, headers=headers, ssl=self._ssl()) as resp:
                    if resp.status >= 400:
                        raise ExternalAPIError("twitch", f"HTTP {resp.status} for {channel}")
                    data = await resp.json(content_type=None)
        except ExternalAPIError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise ExternalAPIError("twitch", f"{type(e).__name__}: {e}") from e

        if not isinstance(data, dict):
            raise ExternalAPIError("twitch", f"Unexpected response body: {data!r}")
        return data.get("stream")

    async def get_stream_status(self, channel: str = "twoeasy") -> StreamStatus:
        return StreamStatus.from_stream(await self.get_stream(channel))
