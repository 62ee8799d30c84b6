"""
postguard - submission security checks for a blogging backend.
"""

__version__ = "0.1.0"
