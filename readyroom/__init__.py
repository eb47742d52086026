"""Ready / start match button logic for multiplayer rooms."""

__version__ = "1.0.0"
