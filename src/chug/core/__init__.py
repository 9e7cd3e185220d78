"""Core estimation engine."""
