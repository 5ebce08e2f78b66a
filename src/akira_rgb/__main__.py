"""Main entry point for akira-rgb."""

from akira_rgb.cli.main import cli

if __name__ == "__main__":
    cli()
