"""
profile_binding.api

API package (FastAPI).

Responsibilities:
- App factory, routers, and dependency wiring.
"""

# Package marker.
