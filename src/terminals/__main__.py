import sys

from terminals.main_window import main

if __name__ == "__main__":
    sys.exit(main())
