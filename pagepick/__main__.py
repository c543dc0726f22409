"""Module entrypoint for ``python -m pagepick``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and runtime setup happen in ``pagepick.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
