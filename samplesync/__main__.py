"""
Main entry point for the samplesync CLI.
"""

from samplesync.cli import cli


def main() -> None:
    """Main function for the samplesync CLI."""
    cli()


if __name__ == "__main__":
    main()
