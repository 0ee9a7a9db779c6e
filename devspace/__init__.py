"""devspace - one Docker container per project, with a shell attached."""

__version__ = "0.1.0"

# Export main CLI for convenience
from .cli.main import cli

__all__ = ['cli']
