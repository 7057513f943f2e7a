"""Main entry point for the formcheck package when run as a module.

This module enables running formcheck directly using 'python -m formcheck'.
It provides a simple command router to different submodules.
"""

import sys

from . import cli


def main():
    """Main entry point for the package."""
    if len(sys.argv) < 2:
        print("Usage: python -m formcheck <command> [args...]")
        print("\nAvailable commands:")
        print("  cli - Access the CLI interface")
        sys.exit(1)

    command = sys.argv.pop(1)

    if command == "cli":
        sys.exit(cli.main())
    else:
        print(f"Unknown command: {command}")
        print("Available commands: cli")
        sys.exit(1)


if __name__ == "__main__":
    main()
