"""
Utility functions module.

Time helpers shared across the trade utilities.

Time Semantics:
- All instants are timezone-aware UTC datetimes
- Durations are timedelta values and may be negative once a deadline passed
- The wall clock is always injected as a zero-argument callable
"""
