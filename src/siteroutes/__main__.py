"""``python -m siteroutes`` runs the framework variant."""

from siteroutes.cli import main_app

main_app()
