"""skycoords command-line interface."""
