"""Entry point for running isikukood_util as a module.

This allows the package to be executed as:
    python -m isikukood_util
"""

from isikukood_util.cli.main import cli

if __name__ == "__main__":
    cli()
