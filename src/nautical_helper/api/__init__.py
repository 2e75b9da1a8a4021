"""HTTP surface over the calculators."""
