"""Adapters for Slack, Twitch, the team registry and the web layer."""
