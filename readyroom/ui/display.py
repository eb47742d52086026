"""
What the ready button shows for a given room state.

Everything here is a pure function of its arguments: no clocks, no
scheduling, no access to the room client.
"""

from dataclasses import dataclass
from datetime import timedelta

from ..messages.localization import ReadyButtonMessages
from ..rooms.models import MultiplayerRoom, MultiplayerRoomUser, MultiplayerUserState
from .colours import ButtonColour

# States in which the local user is waiting on the match rather than on themselves.
WAITING_STATES = frozenset({MultiplayerUserState.READY, MultiplayerUserState.SPECTATING})


@dataclass(frozen=True)
class DerivedDisplay:
    """Label and colour category for the ready button."""

    text: str
    colour: ButtonColour


def format_countdown(remaining: timedelta) -> str:
    """Format a remaining time as mm:ss (minutes within the hour, whole seconds)."""
    total_seconds = max(0, remaining // timedelta(seconds=1))
    minutes = (total_seconds // 60) % 60
    seconds = total_seconds % 60
    return f"{minutes:02d}:{seconds:02d}"


def is_waiting(local_user: MultiplayerRoomUser | None) -> bool:
    """Whether the local user is ready or spectating."""
    return local_user is not None and local_user.state in WAITING_STATES


def derive_text(
    room: MultiplayerRoom | None,
    local_user: MultiplayerRoomUser | None,
    remaining: timedelta | None,
    is_host: bool,
    locale: str = "en",
) -> str:
    """Label for the ready button. remaining is None when no countdown is active."""
    messages = ReadyButtonMessages(locale)
    if room is None:
        return messages.ready()

    ready, total = room.count_ready(), room.count_participants()

    match (remaining is not None, is_waiting(local_user), is_host):
        case (True, False, _):
            return messages.ready_with_countdown(format_countdown(remaining))
        case (True, True, _):
            return messages.countdown_with_count(format_countdown(remaining), ready, total)
        case (False, False, _):
            return messages.ready()
        case (False, True, True):
            return messages.start_match(ready, total)
        case (False, True, False):
            return messages.waiting_for_host(ready, total)


def derive_colour(
    room: MultiplayerRoom | None,
    local_user: MultiplayerRoomUser | None,
    countdown_active: bool,
    is_host: bool,
) -> ButtonColour:
    """Colour category for the ready button."""
    if room is None:
        return ButtonColour.GREEN

    match (is_waiting(local_user), is_host, countdown_active):
        case (False, _, _):
            return ButtonColour.GREEN
        case (True, True, False):
            return ButtonColour.GREEN
        case _:
            return ButtonColour.YELLOW


def derive_display(
    room: MultiplayerRoom | None,
    local_user: MultiplayerRoomUser | None,
    remaining: timedelta | None,
    is_host: bool,
    locale: str = "en",
) -> DerivedDisplay:
    """Label and colour for the ready button."""
    return DerivedDisplay(
        text=derive_text(room, local_user, remaining, is_host, locale),
        colour=derive_colour(room, local_user, remaining is not None, is_host),
    )


def should_offer_cancel(
    room: MultiplayerRoom | None,
    local_user: MultiplayerRoomUser | None,
    is_host: bool,
) -> bool:
    """Whether clicking the button would cancel a running countdown."""
    return (
        room is not None
        and room.countdown is not None
        and is_host
        and local_user is not None
        and local_user.state == MultiplayerUserState.READY
        and not room.settings.auto_start_enabled
    )


def derive_tooltip(
    room: MultiplayerRoom | None,
    local_user: MultiplayerRoomUser | None,
    is_host: bool,
    default: str,
    locale: str = "en",
) -> str:
    """Tooltip for the ready button, falling back to the control's own."""
    if should_offer_cancel(room, local_user, is_host):
        return ReadyButtonMessages(locale).cancel_countdown()
    return default
