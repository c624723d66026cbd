"""Content core — load the content document, resolve placeholders, build nav state.

Everything under this package is pure apart from the loader: adapters
(build, server, CLI) depend on it, never the reverse.
"""


class ContentError(Exception):
    """Base class for content document problems."""


class ContentLoadError(ContentError):
    """The content file is missing, unreadable, or not a JSON mapping."""


class MissingContentKey(ContentError, KeyError):
    """A required top-level key (``meta``, ``nav``) is absent."""

    def __str__(self) -> str:
        return f"content document has no '{self.args[0]}' entry"
