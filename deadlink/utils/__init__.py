"""deadlink utility functions."""
