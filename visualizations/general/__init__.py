"""General-purpose plots."""
