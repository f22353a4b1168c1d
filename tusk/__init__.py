"""
Tusk - a command-line task tracker.

Tasks are grouped under named accounts and persisted to a single JSON file.
"""

__version__ = "0.1.0"
