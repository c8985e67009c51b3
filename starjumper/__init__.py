"""World and subsector generation for science-fiction role-playing games."""

__version__ = "0.1.0"