"""
Building construction cost estimator.

Cost calculation over a fixed rate table plus a small project store.
"""

__version__ = "1.0.0"
