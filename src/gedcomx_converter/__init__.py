"""
gedcomx_converter: GEDCOM 5.5 person records to GEDCOM X conclusion model.
"""

__version__ = "0.1.0"
