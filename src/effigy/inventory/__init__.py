"""
Inventory package.

Fact sources and the collector that reads the four advisory facts from them.
The osquery backed source is imported on demand from inventory.osquery_source.
"""

from effigy.inventory.collector import FACT_QUERIES, collect_facts
from effigy.inventory.static import StaticInventorySource

__all__ = ["FACT_QUERIES", "StaticInventorySource", "collect_facts"]
