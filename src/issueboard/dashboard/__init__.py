"""
Terminal rendering for issueboard using Rich.
"""

from issueboard.dashboard.renderer import BoardRenderer

__all__ = ["BoardRenderer"]
