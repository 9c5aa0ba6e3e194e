"""Numerical tensor calculus: tensors, curvature, Newton steps and electromagnetic stress-energy."""

__version__ = "0.1.0"