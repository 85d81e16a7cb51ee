"""Allow running the CLI with `python -m arranger`."""

from arranger.cli import app

if __name__ == "__main__":
    app()
