"""Domain layer: calculators, checks and their evaluation."""
