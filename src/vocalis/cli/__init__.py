"""Command line interface for Vocalis."""
