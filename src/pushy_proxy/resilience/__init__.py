"""Resilience – retry policies."""
