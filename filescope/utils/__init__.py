"""Format detection and console display."""
