"""Configuration and credential helpers."""
