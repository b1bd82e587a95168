"""
Ping Pong: two-player pong simulation core with a pygame presenter
"""

__version__ = "1.0.0"
