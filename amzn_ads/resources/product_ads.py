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
"""Module for managing product ads."""

from __future__ import annotations

from amzn_ads import response as api_response
from amzn_ads.resources import base


class ProductAds(base.BaseResource):
  """Calls to `productAds` resource.

  Ad type is taken from campaign type (sponsoredProducts by default);
  `campaignType` is never sent to versioned API.
  """

  def get_product_ad(
    self, product_ad_id: str | int, campaign_type: str | None = None
  ) -> api_response.ApiResponse:
    prefix = self._params_prefix(campaign_type)
    return self._call(f'{prefix}productAds/{product_ad_id}')

  def get_product_ad_ex(
    self, product_ad_id: str | int, campaign_type: str | None = None
  ) -> api_response.ApiResponse:
    prefix = self._params_prefix(campaign_type)
    return self._call(f'{prefix}productAds/extended/{product_ad_id}')

  def create_product_ads(
    self, data: base.Payload, campaign_type: str | None = None
  ) -> api_response.ApiResponse:
    return self._send(data, campaign_type, 'POST')

  def update_product_ads(
    self, data: base.Payload, campaign_type: str | None = None
  ) -> api_response.ApiResponse:
    return self._send(data, campaign_type, 'PUT')

  def archive_product_ad(
    self, product_ad_id: str | int, campaign_type: str | None = None
  ) -> api_response.ApiResponse:
    prefix = self._params_prefix(campaign_type)
    return self._call(f'{prefix}productAds/{product_ad_id}', verb='DELETE')

  def list_product_ads(
    self, params: base.Params = None
  ) -> api_response.ApiResponse:
    prefix = self._params_prefix(base.get_campaign_type(params))
    return self._call(f'{prefix}productAds', params)

  def list_product_ads_ex(
    self, params: base.Params = None
  ) -> api_response.ApiResponse:
    prefix = self._params_prefix(base.get_campaign_type(params))
    return self._call(f'{prefix}productAds/extended', params)

  def _send(
    self, data: base.Payload, campaign_type: str | None, verb: str
  ) -> api_response.ApiResponse:
    prefix = self._params_prefix(campaign_type or base.get_campaign_type(data))
    if not self.is_legacy:
      data = base.without_campaign_type(data)
    return self._call(f'{prefix}productAds', data, verb)
