"""
appctl.

- core/: Configuration, logging, exception taxonomy
- cli/: Command contract, HTTP transport, table rendering, app commands
"""
