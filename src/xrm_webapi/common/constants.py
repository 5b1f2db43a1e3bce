# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Protocol constants for the Web API.

Header names, fixed header values and the annotation identifiers used in
``Prefer`` directives.
"""

# Protocol version sent in OData-MaxVersion / OData-Version
ODATA_VERSION = "4.0"

HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_ODATA_MAX_VERSION = "OData-MaxVersion"
HEADER_ODATA_VERSION = "OData-Version"
HEADER_PREFER = "Prefer"
HEADER_AUTHORIZATION = "Authorization"

# Response header carrying the URL of a newly created record
HEADER_ODATA_ENTITY_ID = "OData-EntityId"

CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_JSON_UTF8 = "application/json; charset=utf-8"

# Annotation identifiers for odata.include-annotations
ANNOTATION_FORMATTED_VALUE = "OData.Community.Display.V1.FormattedValue"
"""Display-formatted values (option set labels, currency strings, dates)."""

ANNOTATION_LOOKUP_LOGICAL_NAME = "Microsoft.Dynamics.CRM.lookuplogicalname"
"""Logical name of the table a lookup column points to."""

ANNOTATION_ASSOCIATED_NAVIGATION_PROPERTY = "Microsoft.Dynamics.CRM.associatednavigationproperty"
"""Single-valued navigation property behind a lookup column."""

ANNOTATION_ALL = "*"

DEFAULT_VENDOR_NAMESPACE = "Microsoft.Dynamics.CRM"
