"""Allow ``python -m intcalc``."""

from intcalc.cli import main

main()
