"""HTTP presentation layer for the adventure planning session."""
