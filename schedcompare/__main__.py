"""
Package entry point.

Allows running the tool via:

    python -m schedcompare

This simply forwards execution to schedcompare.cli.main().
"""

from schedcompare.cli import main

if __name__ == "__main__":
    main()
