"""Library App - Core Application Package

This package contains the core application modules including:
- Data models (book.py, member.py)
- Library management logic (library.py)
- JSON persistence layer (storage.py)
- Transaction log (transaction_log.py)
- Settings (config.py) and CLI output helpers (ui_helpers.py)
"""
