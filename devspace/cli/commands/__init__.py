"""devspace CLI commands."""
