"""
Core Module.

Configuration loading, structured logging and the exception taxonomy
shared by every command.
"""
