"""Sail club membership service."""
