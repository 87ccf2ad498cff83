"""Internal helpers: character classes, percent codec, shared types."""
