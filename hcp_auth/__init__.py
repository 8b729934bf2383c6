"""HCP workload authentication for CI jobs."""

__version__ = "1.0.0"
