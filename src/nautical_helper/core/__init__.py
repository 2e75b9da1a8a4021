"""Shared building blocks: parsing, units, results and configuration."""
