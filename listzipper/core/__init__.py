"""Core primitives: the zipper and the transforms built on ``extend``."""
