"""
profile_binding.services

Service-layer package.

Responsibilities:
- Own the set of deployed trees and run the logging profile phase on them.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services should be pure Python and easily testable with fake registries.
