"""Room state and the room notification source."""

from .client import RoomClient, RoomPacketError
from .models import (
    MultiplayerCountdown,
    MultiplayerRoom,
    MultiplayerRoomSettings,
    MultiplayerRoomUser,
    MultiplayerUserState,
)

__all__ = [
    "RoomClient",
    "RoomPacketError",
    "MultiplayerCountdown",
    "MultiplayerRoom",
    "MultiplayerRoomSettings",
    "MultiplayerRoomUser",
    "MultiplayerUserState",
]
