# Copyright 2024 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Module for defining exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
  from amzn_ads import response as api_response


class AmznAdsException(Exception):
  """Base exception."""


class ConfigError(AmznAdsException):
  """Base exception for invalid client configuration."""


class MissingParameterError(ConfigError):
  """Specifies missing required config parameter."""


class InvalidParameterError(ConfigError):
  """Specifies malformed config parameter."""


class UnknownParameterError(ConfigError):
  """Specifies config parameter the client does not know about."""


class InvalidRegionError(ConfigError):
  """Specifies region without known API endpoints."""


class AuthError(AmznAdsException):
  """Base exception for authentication failures."""


class TokenRefreshError(AuthError):
  """Raised when access token cannot be obtained from the token endpoint.

  Attributes:
      response: Full response returned by the token endpoint.
  """

  def __init__(
    self, message: str, response: api_response.ApiResponse | None = None
  ) -> None:
    super().__init__(message)
    self.response = response


class ProtocolError(AmznAdsException):
  """Base exception for requests the client cannot build."""


class UnknownVerbError(ProtocolError):
  """Specifies HTTP verb outside of GET, POST, PUT and DELETE."""


class InvalidReportTypeError(ProtocolError):
  """Specifies unsupported report type tag."""


class NoTypeSetError(ProtocolError):
  """Specifies missing ad type prefix for versioned API paths."""


class MissingRequestParameterError(ProtocolError):
  """Specifies parameter that a resource method requires."""


class MissingRedirectLocationError(ProtocolError):
  """Raised when HTTP 307 response has no Location header."""


class ArtifactNotReadyError(AmznAdsException):
  """Raised when report or snapshot is still pending after polling."""


class AmznAdsCliException(AmznAdsException):
  """Base exception for CLI tools."""
