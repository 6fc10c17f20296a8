"""Allow running stgseries as `python -m stgseries`."""

from stgseries.cli import app

if __name__ == "__main__":
    app()
