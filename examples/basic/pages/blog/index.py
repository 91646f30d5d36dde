"""Blog index."""
