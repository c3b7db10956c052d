"""Run the trainlog CLI from a source checkout without installing it."""

from cli.cli import main

if __name__ == "__main__":
    main()
