"""
Test suite for bernoulli_laplace

Contains:
- tests/unit/          : Unit tests for individual modules
"""
