"""HTML transformation: framework script removal and navigation helper injection."""

from .router import get_navigation_helper_script
from .stripper import TransformResult, transform

__all__ = ["TransformResult", "transform", "get_navigation_helper_script"]
