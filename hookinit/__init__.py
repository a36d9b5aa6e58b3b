"""
hookinit — scaffold a pre-commit configuration for a git project.
"""

__version__ = "0.1.0"
