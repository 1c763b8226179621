import sys

from arg_fn.cli import main

if __name__ == "__main__":
    sys.exit(main())
