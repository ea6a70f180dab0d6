"""Module entry point.

Invokes the CLI when the package is executed with python -m salesianos.
"""

from salesianos.cli import run

if __name__ == '__main__':
    run()
