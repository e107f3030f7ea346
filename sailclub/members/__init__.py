"""Member records: validation and persistence."""
