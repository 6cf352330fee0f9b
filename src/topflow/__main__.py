"""Allow running as `python -m topflow`."""

from topflow.cli import main

main()
