"""Control runtime for a robot lawn mower: contexts, events, sensors, services and grid maps."""

__version__ = "0.1.0"