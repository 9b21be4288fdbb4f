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
"""Module for managing product attribute targeting.

Targeting is available only for Sponsored Products, so all paths are
prefixed with `sp/` regardless of API version.
"""

from __future__ import annotations

from amzn_ads import response as api_response
from amzn_ads.resources import base


class _TargetingResource(base.BaseResource):
  resource = 'sp/targets'

  def get(self, target_id: int) -> api_response.ApiResponse:
    return self._call(f'{self.resource}/{target_id}')

  def get_ex(self, target_id: int) -> api_response.ApiResponse:
    return self._call(f'{self.resource}/extended/{target_id}')

  def list(self, params: base.Params = None) -> api_response.ApiResponse:
    return self._call(self.resource, params)

  def list_ex(self, params: base.Params = None) -> api_response.ApiResponse:
    return self._call(f'{self.resource}/extended', params)

  def create(self, data: base.Payload) -> api_response.ApiResponse:
    return self._call(self.resource, data, 'POST')

  def update(self, data: base.Payload) -> api_response.ApiResponse:
    return self._call(self.resource, data, 'PUT')

  def archive(self, target_id: int) -> api_response.ApiResponse:
    return self._call(f'{self.resource}/{target_id}', verb='DELETE')


class ProductTargeting(_TargetingResource):
  """Calls to `sp/targets` resource."""

  resource = 'sp/targets'

  def generate_product_recommendations(
    self, data: base.Payload
  ) -> api_response.ApiResponse:
    """Gets recommended products to target.

    Args:
        data: Mapping with `pageSize` (1-50), `pageNumber` and `asins`.
    """
    return self._call(f'{self.resource}/productRecommendations', data, 'POST')

  def get_targeting_categories(
    self, params: base.Params
  ) -> api_response.ApiResponse:
    return self._call(f'{self.resource}/categories', params)

  def get_brand_recommendations(
    self, params: base.Params
  ) -> api_response.ApiResponse:
    return self._call(f'{self.resource}/brands', params)


class NegativeTargeting(_TargetingResource):
  """Calls to `sp/negativeTargets` resource."""

  resource = 'sp/negativeTargets'
