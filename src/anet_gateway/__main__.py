"""Entry point for running anet_gateway as a module.

This allows the package to be executed as:
    python -m anet_gateway
"""

from anet_gateway.cli.main import cli

if __name__ == "__main__":
    cli()
