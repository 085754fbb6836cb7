"""
REST Resource API

Repository and resource layer for a REST backend.
"""

__version__ = "0.1.0"
