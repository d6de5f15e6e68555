"""
Advisory package.

Request building and the client for the EFIgy advisory service.
"""

from effigy.advisory.builder import PlaceholderFields, build_request
from effigy.advisory.client import ADVISORY_URL, AdvisoryClient

__all__ = ["ADVISORY_URL", "AdvisoryClient", "PlaceholderFields", "build_request"]
