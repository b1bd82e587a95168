"""
PyGame presenter for Ping Pong
"""
