"""Run the API with ``python -m highscores``."""

from .app import main

main()
