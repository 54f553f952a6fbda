"""Core building blocks for tradebook."""
