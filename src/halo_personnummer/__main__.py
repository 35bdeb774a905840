import sys

from halo_personnummer.cli import main

if __name__ == "__main__":
    sys.exit(main())
