import sys

from performscan.cli.analyze import main

if __name__ == "__main__":
    sys.exit(main())
