"""
CLI Client Module.

Command-line client for the application management API.

Architecture:
- Each command is a Command subclass issuing one HTTP request
- Commands receive their transport (APIClient) explicitly
- Output is plain text on stdout; errors are raised, the shell prints them
- Typer dispatch shell lives in the root cli.py

Usage:
    python cli.py --help
    python cli.py app-list
    python cli.py app-create blog python
    python cli.py log blog
"""
