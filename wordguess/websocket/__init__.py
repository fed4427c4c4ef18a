"""
WebSocket Package

Socket.IO event handlers for the session API.
"""
