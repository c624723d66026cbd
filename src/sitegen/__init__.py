"""sitegen — static marketing site generator.

Loads one JSON content document, substitutes brand placeholders, and
renders the fixed set of marketing pages either to static HTML files
or per request from a small server.
"""

__version__ = "0.1.0"
