"""Dataset loading strategies."""
