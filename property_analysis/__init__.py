"""
Rental property investment analysis service.
"""

__version__ = "0.1.0"
