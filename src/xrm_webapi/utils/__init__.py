# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Internal utilities."""

__all__ = []
