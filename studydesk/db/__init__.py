"""Local storage persistence."""
