"""
Command line interface (``gedcomx``).
"""
