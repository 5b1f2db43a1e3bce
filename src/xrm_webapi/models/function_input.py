# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Function parameter type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class FunctionInput:
    """
    A named parameter passed to a bound or unbound function.

    Without an alias the value is written inline (``Name=value``). With an alias the
    parameter references ``@alias`` and the value is supplied as a separate query
    parameter (``?@alias=value``), which is how OData expects complex or typed
    literals to be passed.

    Values are written verbatim: they must already be valid OData literals
    (strings quoted as ``'text'``, etc.).

    :param name: Parameter name as declared by the function.
    :type name: str
    :param value: Literal value.
    :type value: Any
    :param alias: Optional alias name, without the ``@`` prefix.
    :type alias: str or None

    Example::

        FunctionInput("Count", 5)
        FunctionInput("Target", "{'@odata.id':'accounts(...)'}", alias="p1")
    """

    name: str
    value: Any = None
    alias: Optional[str] = None


__all__ = ["FunctionInput"]
