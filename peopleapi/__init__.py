"""HTTP service for storing people enriched with estimated age, gender and nationality."""

__version__ = "0.1.0"