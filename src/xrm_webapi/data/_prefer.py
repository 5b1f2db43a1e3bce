# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Composition of the ``Prefer`` header for read requests."""

from __future__ import annotations

from typing import List, Optional

from ..common.constants import (
    ANNOTATION_ALL,
    ANNOTATION_ASSOCIATED_NAVIGATION_PROPERTY,
    ANNOTATION_FORMATTED_VALUE,
    ANNOTATION_LOOKUP_LOGICAL_NAME,
)


def _compose_prefer_header(
    include_formatted_values: bool = False,
    include_lookup_logical_names: bool = False,
    include_associated_navigation_properties: bool = False,
    max_page_size: Optional[int] = None,
) -> Optional[str]:
    """
    Collapse annotation flags and a page size into one ``Prefer`` header value.

    ``odata.maxpagesize`` comes first when a page size is given. When all three
    annotation flags are set they collapse to ``odata.include-annotations="*"``;
    otherwise only the identifiers of the flags that are set are listed. Flags are
    combined with logical ``and``/``or``, so any truthy value counts as set.

    :return: Header value, or ``None`` when there is nothing to request.
    :rtype: str or None

    Example::

        _compose_prefer_header(True, True, True, 50)
        # 'odata.maxpagesize=50,odata.include-annotations="*"'
    """
    prefer: List[str] = []

    if max_page_size is not None:
        prefer.append(f"odata.maxpagesize={int(max_page_size)}")

    if include_formatted_values and include_lookup_logical_names and include_associated_navigation_properties:
        prefer.append(f'odata.include-annotations="{ANNOTATION_ALL}"')
    else:
        annotations = [
            name
            for flag, name in (
                (include_formatted_values, ANNOTATION_FORMATTED_VALUE),
                (include_lookup_logical_names, ANNOTATION_LOOKUP_LOGICAL_NAME),
                (include_associated_navigation_properties, ANNOTATION_ASSOCIATED_NAVIGATION_PROPERTY),
            )
            if flag
        ]
        if annotations:
            prefer.append('odata.include-annotations="' + ",".join(annotations) + '"')

    if not prefer:
        return None
    return ",".join(prefer)
