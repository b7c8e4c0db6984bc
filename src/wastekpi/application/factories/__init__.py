"""Application factories."""

from wastekpi.application.factories.source_factory import SourceFactory

__all__ = ["SourceFactory"]
