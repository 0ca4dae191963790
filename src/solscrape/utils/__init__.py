"""Small shared helpers (exit codes, JSON output)."""
