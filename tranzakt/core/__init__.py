"""
Core helpers package for the Tranzakt SDK.

Low-level infrastructure: configuration, authentication headers, the
error taxonomy and the request processor every service goes through.
"""

__all__ = []
