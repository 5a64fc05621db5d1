"""
Per-locale field translations for Django models.
"""

__version__ = '1.0.0'
