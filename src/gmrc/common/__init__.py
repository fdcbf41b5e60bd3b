"""Helpers shared by gmrc commands."""
