"""Application layer: ports, DTOs, queries and services."""
