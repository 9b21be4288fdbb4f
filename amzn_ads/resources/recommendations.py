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
"""Module for getting bid recommendations and keyword suggestions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from amzn_ads import response as api_response
from amzn_ads.resources import base


class Recommendations(base.BaseResource):
  """Calls to bid recommendation and keyword suggestion resources."""

  def get_ad_group_bid_recommendations(
    self, ad_group_id: str | int
  ) -> api_response.ApiResponse:
    return self._call(f'adGroups/{ad_group_id}/bidRecommendations')

  def get_keyword_bid_recommendations(
    self, keyword_id: str | int
  ) -> api_response.ApiResponse:
    return self._call(f'keywords/{keyword_id}/bidRecommendations')

  def bulk_get_keyword_bid_recommendations(
    self, ad_group_id: str | int, keywords: list[Mapping[str, Any]]
  ) -> api_response.ApiResponse:
    data = {'adGroupId': ad_group_id, 'keywords': keywords}
    return self._call('keywords/bidRecommendations', data, 'POST')

  def get_ad_group_keyword_suggestions(
    self, params: Mapping[str, Any]
  ) -> api_response.ApiResponse:
    """Gets keyword suggestions for `adGroupId` from params.

    Remaining params are sent as query string.
    """
    params = dict(params)
    ad_group_id = params.pop('adGroupId')
    return self._call(f'adGroups/{ad_group_id}/suggested/keywords', params)

  def get_ad_group_keyword_suggestions_ex(
    self, params: Mapping[str, Any]
  ) -> api_response.ApiResponse:
    params = dict(params)
    ad_group_id = params.pop('adGroupId')
    return self._call(
      f'adGroups/{ad_group_id}/suggested/keywords/extended', params
    )

  def get_asin_keyword_suggestions(
    self, params: Mapping[str, Any]
  ) -> api_response.ApiResponse:
    params = dict(params)
    asin = params.pop('asin')
    return self._call(f'asins/{asin}/suggested/keywords', params)

  def bulk_get_asin_keyword_suggestions(
    self, data: base.Payload
  ) -> api_response.ApiResponse:
    return self._call('asins/suggested/keywords', data, 'POST')
