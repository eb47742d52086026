"""Tests for ready button strings and options."""

from pathlib import Path

import pytest

from readyroom.messages.localization import Localization, ReadyButtonMessages
from readyroom.options import ReadyButtonOptions


@pytest.fixture(autouse=True)
def default_locales():
    Localization.init()
    yield
    Localization.init()


class TestLocalization:
    def test_plain_message(self):
        assert Localization.get("en", "ready-button-ready") == "Ready"

    def test_variables_have_no_bidi_marks(self):
        text = Localization.get("en", "ready-button-ready-count", ready=2, total=3)
        assert text == "(2 / 3 ready)"

    def test_unknown_locale_falls_back_to_english(self):
        assert Localization.get("xx", "ready-button-cancel-countdown") == "Cancel countdown"

    def test_unknown_message_returns_id(self):
        assert Localization.get("en", "no-such-message") == "no-such-message"

    def test_custom_locales_directory(self, tmp_path: Path):
        (tmp_path / "en").mkdir()
        (tmp_path / "en" / "ready.ftl").write_text(
            "ready-button-ready = Bereit\n", encoding="utf-8"
        )
        Localization.init(tmp_path)
        assert Localization.get("en", "ready-button-ready") == "Bereit"
        assert Localization.available_locales() == ["en"]

    def test_missing_locales_returns_id(self, tmp_path: Path):
        Localization.init(tmp_path)
        assert Localization.get("en", "ready-button-ready") == "ready-button-ready"


class TestReadyButtonMessages:
    """Each label the ready button can show, in English."""

    def setup_method(self):
        self.messages = ReadyButtonMessages("en")

    def test_ready(self):
        assert self.messages.ready() == "Ready"

    def test_ready_count(self):
        assert self.messages.ready_count(0, 4) == "(0 / 4 ready)"

    def test_starting_in(self):
        assert self.messages.starting_in("00:42") == "Starting in 00:42"

    def test_ready_with_countdown_lowercases_phrase(self):
        assert self.messages.ready_with_countdown("01:05") == "Ready (starting in 01:05)"

    def test_countdown_with_count(self):
        text = self.messages.countdown_with_count("01:01", 2, 3)
        assert text == "Starting in 01:01 (2 / 3 ready)"

    def test_start_match(self):
        assert self.messages.start_match(1, 3) == "Start match (1 / 3 ready)"

    def test_waiting_for_host(self):
        assert self.messages.waiting_for_host(2, 3) == "Waiting for host... (2 / 3 ready)"

    def test_cancel_countdown(self):
        assert self.messages.cancel_countdown() == "Cancel countdown"

    def test_default_locale_is_english(self):
        assert ReadyButtonMessages() == self.messages

    def test_uses_locale_directory(self, tmp_path: Path):
        (tmp_path / "en").mkdir()
        (tmp_path / "de").mkdir()
        (tmp_path / "en" / "ready.ftl").write_text("ready-button-ready = Ready\n", encoding="utf-8")
        (tmp_path / "de" / "ready.ftl").write_text(
            "ready-button-ready = Bereit\n"
            "ready-button-ready-count = ({ $ready } von { $total } bereit)\n"
            "ready-button-start-match = Spiel starten { $count }\n",
            encoding="utf-8",
        )
        Localization.init(tmp_path)
        messages = ReadyButtonMessages("de")
        assert messages.ready() == "Bereit"
        assert messages.start_match(1, 2) == "Spiel starten (1 von 2 bereit)"
        assert messages.cancel_countdown() == "ready-button-cancel-countdown"


class TestOptions:
    def test_defaults(self):
        options = ReadyButtonOptions()
        assert options.locale == "en"
        assert options.default_tooltip == ""

    def test_missing_file_gives_defaults(self, tmp_path: Path):
        assert ReadyButtonOptions.load(tmp_path / "missing.json") == ReadyButtonOptions()

    def test_save_and_load(self, tmp_path: Path):
        path = tmp_path / "options.json"
        ReadyButtonOptions(locale="de", default_tooltip="Bereit?").save(path)
        loaded = ReadyButtonOptions.load(path)
        assert loaded.locale == "de"
        assert loaded.default_tooltip == "Bereit?"

    def test_tick_interval_is_not_configurable(self, tmp_path: Path):
        """Countdown ticks always land on whole seconds."""
        path = tmp_path / "options.json"
        path.write_text('{"locale": "en", "tick_interval_ms": 250}', encoding="utf-8")
        options = ReadyButtonOptions.load(path)
        assert not hasattr(options, "tick_interval_ms")
