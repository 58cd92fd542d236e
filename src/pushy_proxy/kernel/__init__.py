"""Kernel – shared primitives (error hierarchy)."""
