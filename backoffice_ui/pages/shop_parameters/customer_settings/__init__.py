"""Customer settings, titles listing and title form page objects."""
