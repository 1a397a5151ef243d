"""Console demos for src.core containers."""
