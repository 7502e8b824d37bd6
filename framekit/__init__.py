"""In-memory frame buffer drawing, packed colours, ANSI escapes and naming-service record types."""

__version__ = "0.1.0"