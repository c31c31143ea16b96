"""Entry point for the ticker graph demo."""

import sys

from tickergraph import app


def main():
    sys.exit(app.run())


if __name__ == "__main__":
    main()
