"""
Report Registry - Authority-gated registry of content-addressed reports.

Reports are claims identified by a content hash, carrying a title,
description, lifecycle status and a declared stake. A single configured
authority identity receives submission fees and classifies reports.

Registry Guarantees:
- Report ids are dense and never reused
- A content hash is registered at most once
- Nothing is written unless every check for the operation passes
- The authority identity, once configured, never changes
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
