"""Entry point for ``python -m terrasynth``."""

from .cli import main

main()
