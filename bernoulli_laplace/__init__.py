"""
bernoulli_laplace — exact binomial PMF vs. Moivre-Laplace approximation

Both probabilities are computed in exact rational arithmetic.
"""

__version__ = "0.1.0"
