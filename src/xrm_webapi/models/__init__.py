# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Data models and type definitions for the Web API client.

- :class:`~xrm_webapi.models.guid.Guid`: Record identifier.
- :class:`~xrm_webapi.models.entity.Attribute`: A single named column value.
- :class:`~xrm_webapi.models.entity.Entity`: Ordered attribute list for create/update.
- :class:`~xrm_webapi.models.function_input.FunctionInput`: Function parameter with optional alias.

Note:
    This ``__init__.py`` does NOT import/export models. Import directly from the
    specific module files.
"""

__all__ = []
