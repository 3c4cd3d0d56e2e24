"""Object file readers feeding the allocation analysis."""
