"""Console manager for a volleyball league's players, matches and fans."""

__version__ = "0.1.0"
