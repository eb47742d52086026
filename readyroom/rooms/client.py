"""Client-side cache of the current room and its change notifications."""

import logging
from typing import Any, Callable

from .models import MultiplayerRoom, MultiplayerRoomUser

logger = logging.getLogger(__name__)

RoomUpdatedCallback = Callable[[], Any]


class RoomPacketError(ValueError):
    """Raised when a room packet cannot be turned into a snapshot."""


class RoomClient:
    """
    Holds the latest room snapshot for the local user.

    Listeners subscribe to room_updated notifications and read the snapshot
    through the accessors below. Notifications carry no arguments. Callers
    delivering packets from another thread must hand them over to the
    scheduling thread first; this class does no locking.
    """

    def __init__(self, local_user_id: int | None = None):
        self.local_user_id = local_user_id
        self._room: MultiplayerRoom | None = None
        self._room_updated: list[RoomUpdatedCallback] = []

    @property
    def room(self) -> MultiplayerRoom | None:
        """The current room, or None when not in a room."""
        return self._room

    @property
    def local_user(self) -> MultiplayerRoomUser | None:
        if self._room is None:
            return None
        return self._room.get_user(self.local_user_id)

    @property
    def is_host(self) -> bool:
        """Whether the local user is the room's host."""
        local_user = self.local_user
        return (
            local_user is not None
            and self._room is not None
            and self._room.host_id == local_user.user_id
        )

    @property
    def subscriber_count(self) -> int:
        return len(self._room_updated)

    def subscribe(self, callback: RoomUpdatedCallback) -> None:
        """Register a callback for room changes."""
        self._room_updated.append(callback)
        logger.debug("Room listener added (%d total)", len(self._room_updated))

    def unsubscribe(self, callback: RoomUpdatedCallback) -> None:
        """Remove a callback. Unknown callbacks are ignored."""
        try:
            self._room_updated.remove(callback)
        except ValueError:
            return
        logger.debug("Room listener removed (%d left)", len(self._room_updated))

    def set_room(self, room: MultiplayerRoom | None) -> None:
        """Replace the snapshot and notify listeners."""
        self._room = room
        self._notify()

    def apply_packet(self, packet: dict) -> bool:
        """
        Apply a room packet from the server.

        Args:
            packet: Decoded packet. "room_updated" carries the full room under
                "room"; "room_left" clears it.

        Returns:
            True if the packet was a room packet, False if it was ignored.

        Raises:
            RoomPacketError: If a room_updated packet is malformed. The current
                snapshot is left unchanged.
        """
        packet_type = packet.get("type")

        if packet_type == "room_updated":
            try:
                room = MultiplayerRoom.from_dict(packet["room"])
            except Exception as e:
                logger.warning("Dropping malformed room packet: %s", e)
                raise RoomPacketError(f"Malformed room packet: {e}") from e
            self.set_room(room)
            return True

        if packet_type == "room_left":
            self.set_room(None)
            return True

        return False

    def _notify(self) -> None:
        # Iterate a copy so listeners may unsubscribe while being notified,
        # but never call one that was removed by an earlier listener.
        for callback in list(self._room_updated):
            if callback in self._room_updated:
                callback()
