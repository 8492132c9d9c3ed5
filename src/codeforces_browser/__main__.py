import sys

from codeforces_browser.cli import main

if __name__ == "__main__":
    sys.exit(main())
