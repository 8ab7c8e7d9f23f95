"""Entry point for `python -m themeindex`."""

import sys


def main():
    from themeindex.app import run_app
    sys.exit(run_app())


if __name__ == "__main__":
    main()
