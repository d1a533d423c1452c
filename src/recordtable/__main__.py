# recordtable/src/recordtable/__main__.py
"""
Main entry point for ``python -m recordtable``.
"""

from .core.cli_app import main

if __name__ == "__main__":
    main()
