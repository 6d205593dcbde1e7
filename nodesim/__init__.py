"""In-memory distributed system simulator served over HTTP."""

__version__ = "0.1.0"
