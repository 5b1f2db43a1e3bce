# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Operation namespace classes for the Web API client.

- RecordOperations: CRUD and single-column operations on records
- ActionOperations: bound/unbound actions and functions
"""

__all__ = []
