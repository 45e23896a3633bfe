"""Command line interface for vtuconv."""
