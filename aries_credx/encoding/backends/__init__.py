"""Concrete integer domains attribute encodings can target."""
