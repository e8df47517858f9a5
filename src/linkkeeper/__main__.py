"""Allow ``python -m linkkeeper``."""

from linkkeeper.cli.main import main

if __name__ == "__main__":
    main()
