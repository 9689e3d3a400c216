"""Allow ``python -m tallyfile``."""

from tallyfile.cli.app import main

main()
