#!/usr/bin/env python3
"""
Diophant: integer solutions of quadratic Diophantine equations

Main entry point for the Diophant command line tool.
This file serves as a thin wrapper that delegates all functionality
to the diophant_pkg package.

Usage:
    python diophant.py "x^2 - y^2 = 0"             # Solve an equation string
    python diophant.py --coeffs 1 2 3 3 5 0        # Solve from coefficients
    python diophant.py --format json "2x + 4y = 6" # Machine-readable output
    python diophant.py --help                      # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for Diophant.

    Delegates to diophant_pkg.cli, which handles argument parsing,
    solving and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    from diophant_pkg.cli import main_entry

    return main_entry(sys.argv[1:])


if __name__ == "__main__":
    sys.exit(main())
