"""Core pipeline: discover → strip → assemble → write."""
