"""Headline sources."""
