"""Permet l'execution via `python -m mediasort`."""

from mediasort.main import main

main()
