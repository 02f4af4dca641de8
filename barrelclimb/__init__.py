"""Rules, physics and frame loop of a barrel-jumping arcade game on pygame."""

__version__ = "0.1.0"