from __future__ import annotations

import re

from ..common.time_utils import time_to_minutes

# One or two digit hour, colon, two digit minute; anywhere in the cell.
TIME_TOKEN = re.compile(r"\d{1,2}:\d{2}", re.ASCII)


def extract_punches(cell: str) -> list[int]:
    """All punches found in one day cell, as sorted minutes since midnight.

    A cell may hold several punches separated by spaces or line breaks,
    e.g. ``"07:49\\n21:05"``.
    """
    return sorted(time_to_minutes(token) for token in TIME_TOKEN.findall(cell))
