"""Module entrypoint for ``python -m showfiles``."""

from .cli import main


if __name__ == "__main__":
    main()
