"""Transcript data models and timestamp normalization."""
