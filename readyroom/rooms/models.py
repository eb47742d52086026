"""
Room state as seen by the client.

Snapshots are built from server packets and replaced wholesale whenever the
room changes. Nothing in the client mutates a snapshot after it is built.
"""

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum

from mashumaro.mixins.json import DataClassJSONMixin


class MultiplayerUserState(Enum):
    """Where a user is in the match lifecycle."""

    IDLE = "idle"
    READY = "ready"
    WAITING_FOR_LOAD = "waiting_for_load"
    LOADED = "loaded"
    READY_FOR_GAMEPLAY = "ready_for_gameplay"
    PLAYING = "playing"
    FINISHED_PLAY = "finished_play"
    RESULTS = "results"
    SPECTATING = "spectating"


@dataclass
class MultiplayerCountdown(DataClassJSONMixin):
    """
    A countdown started by the server.

    Two countdowns with different ids are unrelated, even if their remaining
    times happen to match.
    """

    id: int
    time_remaining: timedelta  # As of when the server sent it


@dataclass
class MultiplayerRoomUser(DataClassJSONMixin):
    """A user in a room."""

    user_id: int
    username: str = ""
    state: MultiplayerUserState = MultiplayerUserState.IDLE


@dataclass
class MultiplayerRoomSettings(DataClassJSONMixin):
    """Host-controlled room settings."""

    name: str = ""
    auto_start_duration: timedelta = timedelta(0)  # Zero disables auto start

    @property
    def auto_start_enabled(self) -> bool:
        return self.auto_start_duration != timedelta(0)


@dataclass
class MultiplayerRoom(DataClassJSONMixin):
    """A snapshot of a multiplayer room."""

    room_id: int
    users: list[MultiplayerRoomUser] = field(default_factory=list)
    host_id: int | None = None
    settings: MultiplayerRoomSettings = field(default_factory=MultiplayerRoomSettings)
    countdown: MultiplayerCountdown | None = None

    @property
    def host(self) -> MultiplayerRoomUser | None:
        if self.host_id is None:
            return None
        return self.get_user(self.host_id)

    def get_user(self, user_id: int | None) -> MultiplayerRoomUser | None:
        """Find a user by id."""
        if user_id is None:
            return None
        return next((u for u in self.users if u.user_id == user_id), None)

    def count_ready(self) -> int:
        """Number of users who are ready."""
        return sum(1 for u in self.users if u.state == MultiplayerUserState.READY)

    def count_participants(self) -> int:
        """Number of users taking part, i.e. everyone who is not spectating."""
        return sum(1 for u in self.users if u.state != MultiplayerUserState.SPECTATING)
