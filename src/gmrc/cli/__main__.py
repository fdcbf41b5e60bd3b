"""Main entry point for the gmrc CLI when run as a module."""

from gmrc.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
