"""Go Art gallery web client: artwork submission pipeline and supporting views."""

__version__ = "0.1.0"
