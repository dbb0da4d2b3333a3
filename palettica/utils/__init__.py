"""Small numeric and formatting helpers shared across palettica."""
