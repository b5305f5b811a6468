"""
Contest History Dashboard API Package.

This package contains the HTTP boundary:
- leetcode: Proxy that relays contest-history queries to the ranking service
"""

__version__ = "1.0.0"
