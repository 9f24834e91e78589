"""Port interfaces (Hexagonal Architecture)."""

from livebot.ports.inbound import EventDispatcherPort
from livebot.ports.outbound import ChatPort, PostResult, StreamStatusPort, TeamRegistryPort

__all__ = [
    "EventDispatcherPort",
    "ChatPort",
    "PostResult",
    "StreamStatusPort",
    "TeamRegistryPort",
]
