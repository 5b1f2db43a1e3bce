# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Client for the Dataverse / Dynamics 365 Web API.

Record CRUD, single-column updates, and bound/unbound actions and functions over
OData v4, with control over the annotations returned alongside results.
"""

from .client import WebApiClient

__version__ = "0.1.0"

__all__ = ["WebApiClient", "__version__"]
