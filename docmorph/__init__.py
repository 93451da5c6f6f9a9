"""
DocMorph - template-driven document formatting.
"""

__version__ = "1.0.0"
