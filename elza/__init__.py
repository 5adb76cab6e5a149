"""ELZA - Scaffold React projects from packaged templates.

This package provides a Python CLI application that creates new front-end
projects for a chosen build tool, language, loader and CSS preprocessor.
"""

__version__ = "0.3.0"
SCRIPT_NAME = "elza-cli"
PACKAGE_NAME = "elza-cli"

__all__ = [
    "__version__",
    "SCRIPT_NAME",
    "PACKAGE_NAME",
]
