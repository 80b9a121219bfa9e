"""
profile_binding.profiles

Logging profiles as seen by the processor.

Responsibilities:
- Log context and configuration view types.
- The profile registry boundary (lookup only; lifecycle is owned elsewhere).
"""

# Package marker.
