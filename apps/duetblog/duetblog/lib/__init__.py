"""Boundary pieces: configuration, content store, sanitizer, page shell."""
