"""
Core utilities shared across the gym records API.

This package hosts configuration (env vars, storage selection), logging
setup and the identifier/clock collaborators used by the services.
"""
