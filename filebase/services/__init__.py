"""
High-level use cases for filebase.

Service modules orchestrate stores and domain rules (register, login).
Callers should go through these services instead of editing the ``users``
collection directly.
"""
