"""gmrc CLI commands."""
