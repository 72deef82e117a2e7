"""cms-admin: content type and entry management for a CMS admin shell."""

__version__ = "0.1.0"
