"""
Table package.

The osquery adapter lives in table.osquery_plugin and is not imported here,
so the rest of the package works without osquery installed.
"""

from effigy.table.plugin import EffigyTable, advise
from effigy.table.row import assemble_row

__all__ = ["EffigyTable", "advise", "assemble_row"]
