# speckit/__main__.py
"""Allow `python -m speckit`."""

from speckit.cli.cli import app

if __name__ == "__main__":
    app()
