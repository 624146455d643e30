"""
Command implementations behind the CLI and function handlers.
"""
