# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Record identifier type."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from ..core._error_codes import VALIDATION_INVALID_GUID
from ..core.errors import ValidationError

_GUID_RE = re.compile(r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}")


@dataclass(frozen=True)
class Guid:
    """
    Unique record identifier.

    Surrounding braces (``{...}``) and whitespace are stripped on construction. The
    remaining text must be a hyphenated 36-character GUID.

    :param value: GUID string.
    :type value: str
    :raises ~xrm_webapi.core.errors.ValidationError: If ``value`` is not GUID-shaped.

    Example::

        Guid("{00000000-0000-0000-0000-000000000001}").value
        # '00000000-0000-0000-0000-000000000001'
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError(
                f"Id must be a string, got {type(self.value).__name__}",
                subcode=VALIDATION_INVALID_GUID,
            )
        v = self.value.strip().strip("{}")
        if not _GUID_RE.fullmatch(v):
            raise ValidationError(f"Id {self.value!r} is not a valid GUID", subcode=VALIDATION_INVALID_GUID)
        object.__setattr__(self, "value", v)

    @classmethod
    def coerce(cls, value: Union["Guid", str]) -> "Guid":
        """Return ``value`` unchanged if it is already a :class:`Guid`, otherwise wrap it."""
        if isinstance(value, Guid):
            return value
        return cls(value)

    def __str__(self) -> str:
        return self.value


__all__ = ["Guid"]
