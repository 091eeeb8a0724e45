"""Utility functions"""

from .boundary_utils import generate_boundary
from .param_utils import has_param, quote_param

__all__ = ["generate_boundary", "has_param", "quote_param"]
