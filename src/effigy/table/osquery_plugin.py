"""
osquery host adapter.

Exposes EffigyTable as an osquery table plugin.

Important
osquery's extension manager instantiates plugin classes without arguments,
so plugin_for binds the table on a fresh subclass instead of passing it in.

Errors raised by the pipeline are reported through the extension status,
code 1 with the error message, which is how osquery surfaces a failed table.
"""

from __future__ import annotations

import logging
from typing import Any

import osquery
from osquery.extensions.ttypes import ExtensionResponse, ExtensionStatus

from effigy.core.errors import EffigyError
from effigy.table.plugin import EffigyTable

logger = logging.getLogger(__name__)


class EffigyTablePlugin(osquery.TablePlugin):
    """Table plugin that delegates to the bound EffigyTable."""

    effigy_table: EffigyTable | None = None

    def _table(self) -> EffigyTable:
        if self.effigy_table is None:
            raise RuntimeError("EffigyTablePlugin used without a bound table, use plugin_for")
        return self.effigy_table

    def name(self) -> str:
        return self._table().name

    def columns(self) -> list[Any]:
        return [osquery.TableColumn(name=c, type=osquery.STRING) for c in self._table().columns()]

    def generate(self, context: Any) -> list[dict[str, str]]:
        return self._table().generate(context)

    def call(self, context: Any) -> ExtensionResponse:
        try:
            return super().call(context)
        except (EffigyError, OSError) as exc:
            logger.error("effigy table failed: %s", exc)
            return ExtensionResponse(
                status=ExtensionStatus(code=1, message=str(exc)),
                response=[],
            )


def plugin_for(table: EffigyTable) -> type[EffigyTablePlugin]:
    """Return a plugin class bound to table, ready for osquery.register_plugin."""
    return type("EffigyTablePlugin", (EffigyTablePlugin,), {"effigy_table": table})
