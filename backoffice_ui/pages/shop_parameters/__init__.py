"""Shop Parameters page objects."""
