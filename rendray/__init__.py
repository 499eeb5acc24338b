"""A small path tracer for spheres and cylinders that writes plain-text PPM images."""

__version__ = "0.1.0"