"""Demo data and fakers used by the scenarios."""
