"""Twitch adapter."""

from livebot.adapters.twitch.client import TwitchClient, TWITCH_API_BASE, TWITCH_ACCEPT

__all__ = ["TwitchClient", "TWITCH_API_BASE", "TWITCH_ACCEPT"]
