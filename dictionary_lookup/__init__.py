"""
dictl - look up English words from the command line
"""

__version__ = "1.0.0"
__description__ = "Command-line dictionary lookup with colourized output"

# Export main factory functions for easy access
from .core.factory import create_dictionary_client, create_renderer

__all__ = ["create_dictionary_client", "create_renderer"]
