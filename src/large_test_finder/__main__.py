# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Entry point for running the finder as a module: python -m large_test_finder"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
