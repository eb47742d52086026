"""
Command-line tools for exercising the ready button without a server.

All operations are parameter-based with no interactive input required.

Usage examples:
    # Watch a 65 second countdown as an idle player
    python -m readyroom simulate --countdown 65 --seconds 5

    # Host who is ready, with two ready players out of three others
    python -m readyroom simulate --state ready --host --players 3 --ready 2

    # The server replaces the countdown halfway through
    python -m readyroom simulate --countdown 30 --change-at 10 --change-to 90

    # Print the label for a single state
    python -m readyroom derive --state spectating --countdown 42 --json

    # Open a window with the button (needs wxPython)
    python -m readyroom demo --countdown 15
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from datetime import timedelta
from typing import Any

from .core.scheduler import ManualScheduler
from .options import ReadyButtonOptions
from .rooms.client import RoomClient
from .rooms.models import (
    MultiplayerCountdown,
    MultiplayerRoom,
    MultiplayerRoomSettings,
    MultiplayerRoomUser,
    MultiplayerUserState,
)
from .ui.display import derive_display, derive_tooltip
from .ui.ready_button import ReadyButtonController
from .ui.surface import RecordingSurface

LOCAL_USER_ID = 1
HOST_USER_ID = 2

STATE_CHOICES = [state.value for state in MultiplayerUserState]


def build_room(
    state: str = "idle",
    host: bool = False,
    players: int = 2,
    ready: int = 0,
    spectators: int = 0,
    countdown: float | None = None,
    auto_start: float = 0,
) -> MultiplayerRoom:
    """
    Build a room containing the local user and some other players.

    Args:
        state: The local user's state.
        host: Whether the local user hosts the room.
        players: Number of other (non-spectating) players.
        ready: How many of those players are ready.
        spectators: Number of other users who are spectating.
        countdown: Seconds left on a countdown, or None for no countdown.
        auto_start: Auto start duration in seconds (0 disables auto start).
    """
    users = [
        MultiplayerRoomUser(LOCAL_USER_ID, "You", MultiplayerUserState(state))
    ]
    for i in range(players):
        users.append(
            MultiplayerRoomUser(
                HOST_USER_ID + i,
                f"Player {i + 1}",
                MultiplayerUserState.READY if i < ready else MultiplayerUserState.IDLE,
            )
        )
    for i in range(spectators):
        users.append(
            MultiplayerRoomUser(
                HOST_USER_ID + players + i,
                f"Spectator {i + 1}",
                MultiplayerUserState.SPECTATING,
            )
        )

    return MultiplayerRoom(
        room_id=1,
        users=users,
        host_id=LOCAL_USER_ID if host else HOST_USER_ID,
        settings=MultiplayerRoomSettings(
            name="Practice room", auto_start_duration=timedelta(seconds=auto_start)
        ),
        countdown=(
            MultiplayerCountdown(id=1, time_remaining=timedelta(seconds=countdown))
            if countdown is not None
            else None
        ),
    )


class ReadyButtonSimulator:
    """Runs the ready button against a scripted room on a manual clock."""

    def __init__(
        self,
        room: MultiplayerRoom,
        options: ReadyButtonOptions | None = None,
        change_at: float | None = None,
        change_to: float | None = None,
    ):
        self.scheduler = ManualScheduler()
        self.client = RoomClient(local_user_id=LOCAL_USER_ID)
        self.surface = RecordingSurface()
        self.controller = ReadyButtonController(
            self.surface, self.client, self.scheduler, options=options
        )
        self.client.set_room(room)
        self._next_countdown_id = 2

        if room.countdown is not None:
            self._schedule_countdown_end(room.countdown)
        if change_at is not None and change_to is not None:
            self.scheduler.run_after(
                lambda: self._replace_countdown(change_to), change_at * 1000
            )

    def _schedule_countdown_end(self, countdown: MultiplayerCountdown) -> None:
        # Stands in for the server clearing the countdown once it expires.
        def finish():
            room = self.client.room
            if room is not None and room.countdown is not None and room.countdown.id == countdown.id:
                self.client.set_room(replace(room, countdown=None))

        self.scheduler.run_after(finish, countdown.time_remaining / timedelta(milliseconds=1))

    def _replace_countdown(self, seconds: float) -> None:
        room = self.client.room
        if room is None:
            return
        countdown = MultiplayerCountdown(
            id=self._next_countdown_id, time_remaining=timedelta(seconds=seconds)
        )
        self._next_countdown_id += 1
        self.client.set_room(replace(room, countdown=countdown))
        self._schedule_countdown_end(countdown)

    def _frame(self) -> dict[str, Any]:
        display = self.controller.display
        return {
            "time": self.scheduler.clock.elapsed_ms / 1000,
            "text": display.text if display else "",
            "colour": display.colour.value if display else "",
            "tooltip": self.controller.tooltip_text,
        }

    def run(self, seconds: int) -> list[dict[str, Any]]:
        """Run for a number of seconds. Returns one frame per label change."""
        self.controller.on_activate()
        frames = [self._frame()]
        for _ in range(seconds):
            self.scheduler.advance(1000)
            frame = self._frame()
            if (frame["text"], frame["colour"]) != (frames[-1]["text"], frames[-1]["colour"]):
                frames.append(frame)
        self.controller.on_deactivate()
        return frames


def _room_from_args(args) -> MultiplayerRoom:
    return build_room(
        state=args.state,
        host=args.host,
        players=args.players,
        ready=args.ready,
        spectators=args.spectators,
        countdown=args.countdown,
        auto_start=args.auto_start,
    )


def _options_from_args(args) -> ReadyButtonOptions:
    options = ReadyButtonOptions.load(args.options) if args.options else ReadyButtonOptions()
    if args.locale:
        options.locale = args.locale
    return options


def cmd_simulate(args):
    """Simulate a room and print the button label as it changes."""
    simulator = ReadyButtonSimulator(
        _room_from_args(args),
        options=_options_from_args(args),
        change_at=args.change_at,
        change_to=args.change_to,
    )
    frames = simulator.run(args.seconds)

    if args.json:
        print(json.dumps(frames, indent=2))
        return

    for frame in frames:
        print(f"[{frame['time']:6.1f}s] {frame['text']} ({frame['colour']})")


def cmd_derive(args):
    """Print the label, colour and tooltip for a single room state."""
    options = _options_from_args(args)
    room = _room_from_args(args)
    local_user = room.get_user(LOCAL_USER_ID)
    is_host = room.host_id == LOCAL_USER_ID
    remaining = timedelta(seconds=args.countdown) if args.countdown is not None else None

    display = derive_display(room, local_user, remaining, is_host, options.locale)
    tooltip = derive_tooltip(room, local_user, is_host, options.default_tooltip, options.locale)

    if args.json:
        print(
            json.dumps(
                {"text": display.text, "colour": display.colour.value, "tooltip": tooltip},
                indent=2,
            )
        )
    else:
        print(display.text)
        print(f"  Colour: {display.colour.value}")
        if tooltip:
            print(f"  Tooltip: {tooltip}")


def cmd_demo(args):
    """Show the button in a window, driven by a simulated room."""
    import wx

    from .ui.wx_ready_button import WxReadyButton

    app = wx.App(False)
    frame = wx.Frame(None, title="Ready button")
    panel = wx.Panel(frame)

    client = RoomClient(local_user_id=LOCAL_USER_ID)
    client.set_room(_room_from_args(args))
    button = WxReadyButton(panel, client, options=_options_from_args(args))

    def on_click(event):
        # Toggle between idle and ready, as the server would after a click.
        room = client.room
        user = client.local_user
        if room is None or user is None:
            return
        new_state = (
            MultiplayerUserState.IDLE
            if user.state == MultiplayerUserState.READY
            else MultiplayerUserState.READY
        )
        users = [
            replace(u, state=new_state) if u.user_id == user.user_id else u
            for u in room.users
        ]
        client.set_room(replace(room, users=users))

    button.Bind(wx.EVT_BUTTON, on_click)

    sizer = wx.BoxSizer(wx.VERTICAL)
    sizer.Add(button, 0, wx.ALL | wx.EXPAND, 12)
    panel.SetSizer(sizer)
    frame.Fit()
    frame.Show()
    app.MainLoop()


def _add_room_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--state",
        choices=STATE_CHOICES,
        default="idle",
        help="Local user state (default: idle)",
    )
    parser.add_argument("--host", action="store_true", help="Local user is the host")
    parser.add_argument(
        "--players", type=int, default=2, help="Other players in the room (default: 2)"
    )
    parser.add_argument(
        "--ready", type=int, default=0, help="How many other players are ready"
    )
    parser.add_argument(
        "--spectators", type=int, default=0, help="Other users who are spectating"
    )
    parser.add_argument(
        "--countdown", type=float, help="Seconds left on an active countdown"
    )
    parser.add_argument(
        "--auto-start",
        dest="auto_start",
        type=float,
        default=0,
        help="Auto start duration in seconds (default: 0, disabled)",
    )
    parser.add_argument("--locale", help="Locale for labels (default: en)")
    parser.add_argument("--options", help="Path to a JSON options file")


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Ready button tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    sim_parser = subparsers.add_parser(
        "simulate", help="Simulate a room and print label changes"
    )
    _add_room_arguments(sim_parser)
    sim_parser.add_argument(
        "--seconds", type=int, default=10, help="Seconds to simulate (default: 10)"
    )
    sim_parser.add_argument(
        "--change-at",
        dest="change_at",
        type=float,
        help="Second at which the server replaces the countdown",
    )
    sim_parser.add_argument(
        "--change-to",
        dest="change_to",
        type=float,
        help="Seconds left on the replacement countdown",
    )
    sim_parser.add_argument("--json", action="store_true", help="Output as JSON")

    derive_parser = subparsers.add_parser(
        "derive", help="Print the label for a single room state"
    )
    _add_room_arguments(derive_parser)
    derive_parser.add_argument("--json", action="store_true", help="Output as JSON")

    demo_parser = subparsers.add_parser(
        "demo", help="Show the button in a window (needs wxPython)"
    )
    _add_room_arguments(demo_parser)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "simulate":
        cmd_simulate(args)
    elif args.command == "derive":
        cmd_derive(args)
    elif args.command == "demo":
        cmd_demo(args)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
