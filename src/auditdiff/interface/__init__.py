"""
Interface layer.

User-facing CLI; delegates to the application layer.
"""
