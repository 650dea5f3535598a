"""Allow `python -m simonpad`."""

from simonpad.cli.main import main

if __name__ == "__main__":
    main()
