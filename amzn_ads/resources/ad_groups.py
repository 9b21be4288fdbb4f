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
"""Module for managing ad groups.

Ad type is taken from campaign type (sponsoredProducts by default), either
passed explicitly or via `campaignType` parameter.
"""

from __future__ import annotations

from amzn_ads import response as api_response
from amzn_ads.resources import base


class AdGroups(base.BaseResource):
  """Calls to `adGroups` resource."""

  def get_ad_group(
    self, ad_group_id: str | int, campaign_type: str | None = None
  ) -> api_response.ApiResponse:
    prefix = self._params_prefix(campaign_type)
    return self._call(f'{prefix}adGroups/{ad_group_id}')

  def get_ad_group_ex(
    self, ad_group_id: str | int, campaign_type: str | None = None
  ) -> api_response.ApiResponse:
    prefix = self._params_prefix(campaign_type)
    return self._call(f'{prefix}adGroups/extended/{ad_group_id}')

  def create_ad_groups(
    self, data: base.Payload, campaign_type: str | None = None
  ) -> api_response.ApiResponse:
    prefix = self._params_prefix(campaign_type or base.get_campaign_type(data))
    return self._call(f'{prefix}adGroups', data, 'POST')

  def update_ad_groups(
    self, data: base.Payload, campaign_type: str | None = None
  ) -> api_response.ApiResponse:
    """Updates ad groups.

    On versioned API `campaignType` is removed from the payload.
    """
    prefix = self._params_prefix(campaign_type or base.get_campaign_type(data))
    if not self.is_legacy:
      data = base.without_campaign_type(data)
    return self._call(f'{prefix}adGroups', data, 'PUT')

  def archive_ad_group(
    self, ad_group_id: str | int, campaign_type: str | None = None
  ) -> api_response.ApiResponse:
    prefix = self._params_prefix(campaign_type)
    return self._call(f'{prefix}adGroups/{ad_group_id}', verb='DELETE')

  def list_ad_groups(
    self, params: base.Params = None
  ) -> api_response.ApiResponse:
    prefix = self._params_prefix(base.get_campaign_type(params))
    return self._call(f'{prefix}adGroups', params)

  def list_ad_groups_ex(
    self, params: base.Params = None
  ) -> api_response.ApiResponse:
    prefix = self._params_prefix(base.get_campaign_type(params))
    return self._call(f'{prefix}adGroups/extended', params)
