"""Module entrypoint for ``python -m storypush``."""

from storypush.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
