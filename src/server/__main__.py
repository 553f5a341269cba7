"""Server entry point: ``python -m src.server``."""

from .run import main

if __name__ == "__main__":
    main()
