"""
Core domain models, mathematical primitives, and contracts.

This module contains the rational-arithmetic building blocks that are
independent of any UI or transport layer.
"""
