"""
Main entry point for running blueprint as a module.

This allows the package to be run with: python -m blueprint
"""

from .src.cli import main

if __name__ == '__main__':
    main()
