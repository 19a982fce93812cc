"""Core models, configuration, exceptions and text helpers."""
