"""
Bar series ingestion.

Parses raw bar payloads into immutable bars and validates a series before any
indicator math runs.
"""
