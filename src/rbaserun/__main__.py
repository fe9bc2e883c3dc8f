import sys

from rbaserun.interface.cli import main

if __name__ == "__main__":
    sys.exit(main())
