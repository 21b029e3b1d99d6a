"""
Core utilities shared across filebase.

This package hosts configuration (Settings), the error taxonomy, password
hashing and logging setup. Repositories and services depend on these
primitives instead of reading os.environ or argon2 directly.
"""
