"""
Encodings that transform attribute data into integers suitable for signing.

Each encoding maps one typed source value onto an element of a bounded
integer domain (see `domain.DomainInt`) while preserving the ordering of
the source values, so range and comparison proofs over the encoded value
reflect the ordering of the raw value.
"""
