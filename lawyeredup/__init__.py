"""LawyeredUp: plain-language contract analysis backed by Claude."""
