"""Blog API: signup/login and draft/published blog posts with owner-only mutation."""

__version__ = "1.0.0"
