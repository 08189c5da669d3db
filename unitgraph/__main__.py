"""
Entry point for the `unitgraph` command-line interface.

unitgraph builds the dependency graph of a multi-unit library build,
derives each unit's archives and publishes one package per unit.
"""


def main():
    """Main entry point for the unitgraph CLI."""
    from .cli import cli

    cli()


if __name__ == "__main__":
    main()
