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
"""Module for managing campaigns.

Single campaign calls take ad type from `campaign_type_prefix` of the
api_client, list calls take it from `campaignType` parameter.
"""

from __future__ import annotations

from amzn_ads import response as api_response
from amzn_ads.resources import base


class Campaigns(base.BaseResource):
  """Calls to `campaigns` resource."""

  def get_campaign(self, campaign_id: str | int) -> api_response.ApiResponse:
    return self._call(f'{self._client_prefix()}campaigns/{campaign_id}')

  def get_campaign_ex(
    self, campaign_id: str | int
  ) -> api_response.ApiResponse:
    return self._call(
      f'{self._client_prefix()}campaigns/extended/{campaign_id}'
    )

  def create_campaigns(self, data: base.Payload) -> api_response.ApiResponse:
    return self._call(f'{self._client_prefix()}campaigns', data, 'POST')

  def update_campaigns(self, data: base.Payload) -> api_response.ApiResponse:
    return self._call(f'{self._client_prefix()}campaigns', data, 'PUT')

  def archive_campaign(
    self, campaign_id: str | int
  ) -> api_response.ApiResponse:
    return self._call(
      f'{self._client_prefix()}campaigns/{campaign_id}', verb='DELETE'
    )

  def list_campaigns(
    self, params: base.Params = None
  ) -> api_response.ApiResponse:
    """Lists campaigns.

    Unknown `campaignType` falls back to `campaign_type_prefix` of the
    api_client; `campaignType` is not sent for Sponsored Brands.

    Args:
        params: Filters; `campaignType` selects ad type.

    Returns:
        Response with list of campaigns.
    """
    fallback = 'hsa' if self.api_client.campaign_type_prefix == 'hsa' else 'sp'
    prefix = self._params_prefix(base.get_campaign_type(params), fallback)
    if prefix == 'hsa/':
      params = base.without_campaign_type(params)
    return self._call(f'{prefix}campaigns', params)

  def list_campaigns_ex(
    self, params: base.Params = None
  ) -> api_response.ApiResponse:
    """Lists campaigns with extended fields.

    Raises:
        NoTypeSetError: When `campaignType` is unknown on versioned API.
    """
    prefix = self._params_prefix(base.get_campaign_type(params))
    return self._call(f'{prefix}campaigns/extended', params)
