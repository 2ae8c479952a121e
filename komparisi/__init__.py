"""
Komparisi: KTP images to Indonesian deed-style identity paragraphs.
"""

__version__ = "1.0.0"
