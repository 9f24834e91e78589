"""Slack adapter."""

from livebot.adapters.slack.client import SlackClient, SLACK_API_BASE

__all__ = ["SlackClient", "SLACK_API_BASE"]
