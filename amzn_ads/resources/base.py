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
"""Module for defining base class of API resources."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Union

from amzn_ads import api_clients, prefixes
from amzn_ads import response as api_response

Params = Optional[Mapping[str, Any]]
Payload = Union[Mapping[str, Any], list]


class BaseResource:
  """Groups calls to a single API resource.

  Resources are stateless: all state (version, profile, token) belongs
  to the api_client.

  Attributes:
      api_client: Client used to call the API.
  """

  def __init__(self, api_client: api_clients.BaseClient) -> None:
    self.api_client = api_client

  @property
  def is_legacy(self) -> bool:
    return prefixes.is_legacy(self.api_client.api_version)

  def _call(
    self, path: str, params: Params | Payload = None, verb: str = 'GET'
  ) -> api_response.ApiResponse:
    return self.api_client.operation(path, params, verb)

  def _client_prefix(self) -> str:
    """Builds prefix from `campaign_type_prefix` of api_client (sp default)."""
    campaign_type = (
      'hsa' if self.api_client.campaign_type_prefix == 'hsa' else 'sp'
    )
    return prefixes.resolve_path_prefix(
      self.api_client.api_version, campaign_type
    )

  def _params_prefix(
    self, campaign_type: str | None, default: str | None = None
  ) -> str:
    """Builds prefix from campaignType tag (sponsoredProducts default)."""
    return prefixes.resolve_path_prefix(
      self.api_client.api_version,
      prefixes.campaign_type_to_prefix(
        campaign_type or prefixes.SPONSORED_PRODUCTS, default
      ),
    )


def get_campaign_type(params: Params | Payload) -> str | None:
  if isinstance(params, Mapping):
    return params.get('campaignType')
  return None


def without_campaign_type(params: Params | Payload) -> Params | Payload:
  """Returns copy of params without `campaignType` key."""
  if isinstance(params, Mapping) and 'campaignType' in params:
    return {
      key: value for key, value in params.items() if key != 'campaignType'
    }
  return params
