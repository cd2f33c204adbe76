"""Allow ``python -m pathwise``."""

from pathwise.cli import main

main()
