"""
profile_binding.deployment

Deployment tree model.

Responsibilities:
- Deployment units, their resource roots and manifest metadata.
"""

# Package marker.
