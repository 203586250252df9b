"""
Database models for the shortener.

A single relation: short id -> original url.
"""

from .short_link import ShortLink, url_digest

__all__ = ["ShortLink", "url_digest"]
