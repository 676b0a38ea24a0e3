"""Domain models for the grid simulation."""
