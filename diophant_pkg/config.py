"""Centralized configuration for Diophant.

This module defines:
- Display limits for infinite solution families
- Input validation limits for the text front-end
- Logging and output defaults
- SymPy parser transformations and the recognised variable names

Configuration can be overridden via:
- CLI flags (see cli/app.py)
- Environment variables (prefixed with DIOPHANT_)
"""

import os

from sympy.parsing.sympy_parser import convert_xor
from sympy.parsing.sympy_parser import implicit_multiplication_application
from sympy.parsing.sympy_parser import standard_transformations

# Version is mirrored in pyproject.toml [project] section
VERSION = "1.0.0"

# Presentation
DISPLAY_LIMIT = int(
    os.getenv("DIOPHANT_DISPLAY_LIMIT", "10")
)  # pairs rendered for an infinite family
OUTPUT_FORMAT = os.getenv("DIOPHANT_OUTPUT_FORMAT", "human")  # "human", "json"

# Input validation limits
MAX_INPUT_LENGTH = int(
    os.getenv("DIOPHANT_MAX_INPUT_LENGTH", "2000")
)  # characters

# Logging
LOG_LEVEL = os.getenv("DIOPHANT_LOG_LEVEL", "WARNING").upper()

# Text front-end
VARIABLE_NAMES = ("x", "y")
PARAMETER_NAME = "t"

TRANSFORMATIONS = standard_transformations + (
    implicit_multiplication_application,
    convert_xor,
)
