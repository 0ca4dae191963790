"""Version-control collaborators (remote source fetch)."""
