"""Localized strings for the ready button."""

from .localization import Localization, ReadyButtonMessages

__all__ = ["Localization", "ReadyButtonMessages"]
