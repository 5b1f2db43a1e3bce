# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Internal pandas helpers"""

from __future__ import annotations

from typing import Any, Dict

import pandas as pd


def strip_odata_keys(record: Dict[str, Any]) -> Dict[str, Any]:
    """Remove OData metadata keys (keys containing '@') from a record dict."""
    return {k: v for k, v in record.items() if "@" not in k}


def page_to_dataframe(page: Any, keep_annotations: bool = False) -> pd.DataFrame:
    """Build a DataFrame from the ``value`` array of a collection response.

    :param page: Parsed response body of a collection read.
    :param keep_annotations: When False (default), keys containing ``@`` are dropped from each row.
    """
    rows = page.get("value", []) if isinstance(page, dict) else []
    if not keep_annotations:
        rows = [strip_odata_keys(r) for r in rows if isinstance(r, dict)]
    return pd.DataFrame(rows)
