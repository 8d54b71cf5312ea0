# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request builder, sub-views and response models."""

from .body import MultipartBody, RequestBody
from .headers import Headers, content_type_boundary, header_value
from .request import Request
from .response import Response, RestResponse
from .uri import RequestURI, UriParts, same_origin

__all__ = [
    "Headers",
    "MultipartBody",
    "Request",
    "RequestBody",
    "RequestURI",
    "Response",
    "RestResponse",
    "UriParts",
    "content_type_boundary",
    "header_value",
    "same_origin",
]
