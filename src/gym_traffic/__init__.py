"""
Gym traffic estimation package.

Synthesizes hourly occupancy for campus gyms:
- historical hours are reproducible (seeded)
- current / future hours are freshly randomized (predicted)
"""

__version__ = "1.0.0"
