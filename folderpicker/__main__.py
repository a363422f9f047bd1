"""Module entrypoint for ``python -m folderpicker``.

Behaves exactly like the ``pf`` console script.
"""

from .cli import main


if __name__ == "__main__":
    main()
