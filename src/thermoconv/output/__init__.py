"""Terminal output: Rich tables and JSON envelopes."""
