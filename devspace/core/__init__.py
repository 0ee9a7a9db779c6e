"""Core functionality for devspace."""
