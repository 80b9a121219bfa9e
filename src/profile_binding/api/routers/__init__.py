"""
profile_binding.api.routers

HTTP routers for the management surface.
"""

# Package marker.
