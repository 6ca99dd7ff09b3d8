"""Encode credential attribute values as cryptographic integers."""
