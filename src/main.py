"""
rbaserun - 1C:Enterprise connection-string launcher

Classifies a server, file or web connection string and starts the 1C
starter executable with the matching parameters.
"""

import sys
from rbaserun.interface.cli import main


if __name__ == "__main__":
    sys.exit(main())
