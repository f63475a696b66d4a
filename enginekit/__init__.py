"""Entity-component system, scene tree, scripts, asset caching, matrices, vectors, quaternions, clock, profiling and console logging for a small game engine."""

__version__ = "0.1.0"