"""Ready button strings, rendered from Fluent files."""

import logging
from dataclasses import dataclass
from pathlib import Path

from fluent_compiler.bundle import FluentBundle

logger = logging.getLogger(__name__)

_DEFAULT_LOCALES_DIR = Path(__file__).parent.parent / "locales"
_FALLBACK_LOCALE = "en"

# Fluent wraps placeables in FIRST STRONG ISOLATE / POP DIRECTIONAL ISOLATE.
_BIDI_MARKS = str.maketrans("", "", "\u2068\u2069")


class Localization:
    """
    Fluent bundles for each locale directory under the locales root.

    A locale without its own directory is served by the English bundle.
    Bundles are compiled on first use and kept until init() is called again.
    """

    _bundles: dict[str, FluentBundle] = {}
    _locales_dir: Path = _DEFAULT_LOCALES_DIR

    @classmethod
    def init(cls, locales_dir: Path | str | None = None) -> None:
        """Point at a locales root and forget any compiled bundles."""
        cls._locales_dir = Path(locales_dir) if locales_dir else _DEFAULT_LOCALES_DIR
        cls._bundles = {}

    @classmethod
    def available_locales(cls) -> list[str]:
        return sorted(d.name for d in cls._locales_dir.iterdir() if d.is_dir())

    @classmethod
    def _bundle_for(cls, locale: str) -> FluentBundle:
        bundle = cls._bundles.get(locale)
        if bundle is None:
            bundle = cls._bundles[locale] = cls._compile(locale)
        return bundle

    @classmethod
    def _compile(cls, locale: str) -> FluentBundle:
        locale_dir = cls._locales_dir / locale
        if not locale_dir.is_dir():
            logger.debug("No strings for locale %r, using %r", locale, _FALLBACK_LOCALE)
            locale, locale_dir = _FALLBACK_LOCALE, cls._locales_dir / _FALLBACK_LOCALE

        sources = [f.read_text(encoding="utf-8") for f in sorted(locale_dir.glob("*.ftl"))]
        if not sources:
            raise RuntimeError(f"No .ftl files found in {locale_dir}")
        return FluentBundle.from_string(locale, "\n".join(sources))

    @classmethod
    def get(cls, locale: str, message_id: str, **kwargs) -> str:
        """
        Render a message, or return its id if it cannot be rendered.

        Args:
            locale: The locale code (e.g., 'en', 'de').
            message_id: The message ID from the .ftl file.
            **kwargs: Variables to substitute into the message.
        """
        try:
            result, errors = cls._bundle_for(locale).format(message_id, kwargs)
        except Exception:
            logger.debug("Cannot render %s for %r", message_id, locale, exc_info=True)
            return message_id
        if errors:
            logger.debug("Errors rendering %s for %r: %s", message_id, locale, errors)
        return result.translate(_BIDI_MARKS)


@dataclass(frozen=True)
class ReadyButtonMessages:
    """The ready button's labels and tooltip in one locale."""

    locale: str = _FALLBACK_LOCALE

    def ready(self) -> str:
        return Localization.get(self.locale, "ready-button-ready")

    def ready_count(self, ready: int, total: int) -> str:
        """Ready count, as in (2 / 3 ready)."""
        return Localization.get(self.locale, "ready-button-ready-count", ready=ready, total=total)

    def starting_in(self, time: str) -> str:
        return Localization.get(self.locale, "ready-button-starting-in", time=time)

    def ready_with_countdown(self, time: str) -> str:
        """Ready (starting in mm:ss), for a user who has not readied up."""
        countdown = self.starting_in(time).lower()
        return Localization.get(self.locale, "ready-button-ready-with-countdown", countdown=countdown)

    def countdown_with_count(self, time: str, ready: int, total: int) -> str:
        return Localization.get(
            self.locale,
            "ready-button-countdown-with-count",
            countdown=self.starting_in(time),
            count=self.ready_count(ready, total),
        )

    def start_match(self, ready: int, total: int) -> str:
        return Localization.get(
            self.locale, "ready-button-start-match", count=self.ready_count(ready, total)
        )

    def waiting_for_host(self, ready: int, total: int) -> str:
        return Localization.get(
            self.locale, "ready-button-waiting-for-host", count=self.ready_count(ready, total)
        )

    def cancel_countdown(self) -> str:
        return Localization.get(self.locale, "ready-button-cancel-countdown")
