"""Module entrypoint for ``python -m sizeviewer``.

All argument parsing and runtime setup happen in ``sizeviewer.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
