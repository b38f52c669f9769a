"""Library System - Core Application Package

This package contains the core application modules including:
- Book records (book.py)
- Catalog management logic (library.py)
- Interactive menu shell (shell.py)
- Settings (config.py)
- Input parsing and output rendering helpers (utils/)
"""

__version__ = "1.0.0"
