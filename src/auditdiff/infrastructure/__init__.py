"""
Infrastructure layer.

Flattening, configuration files, logging, wire format and Excel output.
"""
