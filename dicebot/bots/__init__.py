"""Chat bridges."""
