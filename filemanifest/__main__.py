"""Module entrypoint for ``python -m filemanifest``."""

from .cli import main


if __name__ == "__main__":
    main()
