"""Programmatic interface to the rental desk."""
