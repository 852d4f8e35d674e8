"""Terminal output for import runs."""
