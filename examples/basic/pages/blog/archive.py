"""Blog archive, wins over [slug] for /blog/archive."""
