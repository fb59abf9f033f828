"""
HTTP API layer

Flask-RESTX namespaces and the health status shared with the root /health route.
"""
