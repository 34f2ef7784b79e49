"""spkg: sync repository package databases, list packages, inspect specfiles and download source packages."""

__version__ = "3.0.0b4"