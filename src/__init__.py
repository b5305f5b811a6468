"""
Contest History Dashboard - Core Package

This package contains the core modules for:
- Contest history transformation and summaries (src.history)
- Upstream data fetching (src.ingestion)
- Dashboard state and presentation helpers (src.dashboard)
- Shared configuration and utilities
"""

from src.config import *
