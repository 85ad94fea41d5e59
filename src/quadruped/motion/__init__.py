"""Geometry of the feet: vectors, rotations, the leg-position aggregate and the leg solver."""
