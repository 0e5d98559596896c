"""uvws: extra import paths for members of a uv workspace."""

__version__ = "0.3.0"
