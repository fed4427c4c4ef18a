"""
Controllers Package

Flask blueprints for the session API and the scoring endpoint.
"""
