"""
Registration audit CLI entry point.

Usage:
    python -m regaudit [OPTIONS] COMMAND [ARGS]...
"""

from regaudit.cli.main import main

if __name__ == "__main__":
    main()
