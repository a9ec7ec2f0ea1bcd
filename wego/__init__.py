"""
wego - destination search with image and summary enrichment
"""

__version__ = "0.1.0"
