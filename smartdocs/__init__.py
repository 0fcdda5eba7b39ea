"""smartdocs: documentation coverage analysis for multi-language codebases."""

__version__ = "0.1.0"

__all__ = ["__version__"]
