"""Catalog page for browsing Midjourney sref styles."""
__version__ = "0.1.0"
