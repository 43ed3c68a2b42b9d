"""Allow ``python -m eoe``."""

from .cli import main

if __name__ == "__main__":
    main()
