"""Pattern matching and clause bodies."""
