"""Application ports (interfaces implemented by infrastructure)."""

from wastekpi.application.ports.record_source import RecordSource

__all__ = ["RecordSource"]
