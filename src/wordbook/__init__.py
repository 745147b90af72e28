"""Personal vocabulary manager backed by XML documents."""
