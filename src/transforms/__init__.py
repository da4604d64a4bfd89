"""Field-level coercion transforms.

This module repairs text encoding, coerces loose JSON scalars,
and canonicalizes timestamps for the reshaper.
"""
