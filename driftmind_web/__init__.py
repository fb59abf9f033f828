"""
DriftMind Web

Flask gateway in front of the DriftMind API: document upload, semantic
search, document management and token-gated file downloads.
"""

__version__ = "1.0.0"
