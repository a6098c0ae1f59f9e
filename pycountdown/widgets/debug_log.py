from __future__ import annotations

from datetime import datetime
from typing import Any

from rich.text import Text
from textual.widgets import RichLog


class DebugLog(RichLog):
    """timestamped debug lines. hidden unless enabled in `pycountdown.css`"""

    def write_debug(self, msg: Any):
        now = datetime.now().replace(microsecond=0).time()
        self.write(Text.assemble((f"{now} - ", "dim"), str(msg)))
