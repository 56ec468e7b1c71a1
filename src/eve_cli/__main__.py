"""Allow ``python -m eve_cli``."""

from .cli import main

main()
