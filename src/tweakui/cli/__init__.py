"""Command line interface for tweakui."""
