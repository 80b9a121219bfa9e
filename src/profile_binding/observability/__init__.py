"""
profile_binding.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Deployment and request context propagation for consistent log enrichment.
"""

# Package marker.
