"""distro-spec: catalog of build constants for LevitateOS and AcornOS.

Core design goals:
- Single source of truth for paths, package tiers and boot formats
- Immutable value types that only format text
- No side effects beyond filesystem existence checks
- YAML manifests for the large lookup tables
- Centralized logging
"""

__all__ = []
