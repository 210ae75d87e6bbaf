"""
Terminal rendering for deptboard using Rich.

Implements the router's render target for the console.
"""

from deptboard.dashboard.renderer import TerminalRenderer

__all__ = ["TerminalRenderer"]
