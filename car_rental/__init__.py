"""In-memory car rental management."""
