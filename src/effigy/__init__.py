"""
effigy

This package is an osquery table extension that asks the EFIgy advisory
service whether the local firmware, OS version and build number are current.

We keep modules small and well separated:
core contains shared data structures, errors and the wire codec
inventory contains fact sources and the fact collector
advisory contains the request builder and the http client
table contains the row assembler, the table facade and the osquery adapter
"""

__version__ = "0.1.0"
