"""Command line interface for Borno."""
