"""Utilities shared by CLI commands."""
