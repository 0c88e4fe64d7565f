"""Sales Coach - AI sales coaching grounded in a training-document library."""

__version__ = "1.0.0"
