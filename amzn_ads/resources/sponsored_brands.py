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
"""Module for Sponsored Brands stores, brands and campaigns."""

from __future__ import annotations

import logging

from amzn_ads import exceptions
from amzn_ads import response as api_response
from amzn_ads.resources import base

logger = logging.getLogger(__name__)


class SponsoredBrands(base.BaseResource):
  """Calls to Sponsored Brands resources."""

  def get_stores(self, params: base.Params = None) -> api_response.ApiResponse:
    return self._call('stores', params)

  def get_stores_by_brand_entity_id(
    self, brand_entity_id: int
  ) -> api_response.ApiResponse:
    return self._call(f'stores/{brand_entity_id}')

  def get_store_assets(
    self, params: base.Params = None
  ) -> api_response.ApiResponse:
    return self._call('stores/assets', params)

  def get_brands(self, params: base.Params = None) -> api_response.ApiResponse:
    return self._call('brands', params)

  def get_page_asins(self, params: base.Params) -> api_response.ApiResponse:
    """Gets ASINs of a store page.

    Raises:
        MissingRequestParameterError: When `pageUrl` is not provided.
    """
    if not params or 'pageUrl' not in params:
      logger.error('pageUrl should be set as GET param')
      raise exceptions.MissingRequestParameterError(
        'pageUrl should be set as GET param'
      )
    return self._call('pageAsins', params)

  def list_campaigns(
    self, params: base.Params = None
  ) -> api_response.ApiResponse:
    return self._call('sb/campaigns', params)

  def create_campaigns(self, data: base.Payload) -> api_response.ApiResponse:
    return self._call('sb/campaigns', data, 'POST')

  def update_campaigns(self, data: base.Payload) -> api_response.ApiResponse:
    return self._call('sb/campaigns', data, 'PUT')

  def get_campaign(self, campaign_id: int) -> api_response.ApiResponse:
    return self._call(f'sb/campaigns/{campaign_id}')

  def archive_campaign(self, campaign_id: int) -> api_response.ApiResponse:
    return self._call(f'sb/campaigns/{campaign_id}', verb='DELETE')
