"""Shared building blocks: errors, config, templating and output."""
