"""portalcheck - page interaction toolkit for end-to-end portal tests."""

__version__ = "0.1.0"
