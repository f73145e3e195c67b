"""Allow ``python -m statusline``."""

from statusline.cli.main import main

main()
