"""Version information for uniconnect."""

__version__ = "0.3.0"
