import sys

from zfs_savings_matrix.cli import main

if __name__ == "__main__":
    sys.exit(main())
