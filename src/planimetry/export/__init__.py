"""Output formats: text notation and PNG rendering."""
