import sys

from myip.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
