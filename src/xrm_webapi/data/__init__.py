# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Request construction, response resolution and the low-level OData client.

These modules are internal; use :class:`~xrm_webapi.client.WebApiClient`.
"""

__all__ = []
