"""
Interactive command-line to-do list.

Components:
- tasks/: task model, in-memory store, date input, save file, menu operations
- cli/: composition root, menu loop, entrypoint
- connectors/console_connector.py: stdin/stdout console
- config.py / logging_setup.py: settings and logging
"""

__version__ = "1.0.0"
