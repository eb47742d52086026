"""Entry point for running the ready button tools."""

from .cli import main

if __name__ == "__main__":
    main()
