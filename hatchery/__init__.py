"""Hatchery engine: egg hatching, battles and fusion for a creature collection game."""
