"""Allow ``python -m backat``."""

from backat.main import main

main()
