"""Entry point for running elza as a module.

This allows running the application with:
    python -m elza create my-app
"""

from elza.cli.app import app

if __name__ == "__main__":
    app()
