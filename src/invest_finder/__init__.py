"""Investment property catalog filtering and selection engine."""

__version__ = "0.1.0"
