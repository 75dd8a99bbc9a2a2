"""
Continuous tide and current curves from sparse NOAA CO-OPS predictions.
"""

__version__ = '0.1.0'
