"""
Classic Pong: two-player Pong on a pygame window
"""

__version__ = "1.0.0"
