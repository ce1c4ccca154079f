"""Build packages.config manifests from the version metadata of binary libraries."""

__version__ = "0.3.0"

__all__ = ["__version__"]
