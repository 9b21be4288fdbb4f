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
"""Module for managing keywords.

Keyword calls take ad type from `campaign_type_prefix` of the api_client.
"""

from __future__ import annotations

from amzn_ads import response as api_response
from amzn_ads.resources import base


class _KeywordResource(base.BaseResource):
  """Calls shared by biddable and negative keyword resources.

  Attributes:
      resource: Name of resource in API path.
      strip_campaign_type_on_list: Whether `campaignType` filter is removed
          from list parameters on versioned API.
  """

  resource = 'keywords'
  strip_campaign_type_on_list = False

  def get(self, keyword_id: str | int) -> api_response.ApiResponse:
    return self._call(f'{self._client_prefix()}{self.resource}/{keyword_id}')

  def get_ex(self, keyword_id: str | int) -> api_response.ApiResponse:
    return self._call(
      f'{self._client_prefix()}{self.resource}/extended/{keyword_id}'
    )

  def create(self, data: base.Payload) -> api_response.ApiResponse:
    if not self.is_legacy:
      data = base.without_campaign_type(data)
    return self._call(f'{self._client_prefix()}{self.resource}', data, 'POST')

  def update(self, data: base.Payload) -> api_response.ApiResponse:
    if not self.is_legacy:
      data = base.without_campaign_type(data)
    return self._call(f'{self._client_prefix()}{self.resource}', data, 'PUT')

  def archive(self, keyword_id: str | int) -> api_response.ApiResponse:
    return self._call(
      f'{self._client_prefix()}{self.resource}/{keyword_id}', verb='DELETE'
    )

  def list(self, params: base.Params = None) -> api_response.ApiResponse:
    prefix = self._client_prefix()
    if self.strip_campaign_type_on_list and not self.is_legacy:
      params = base.without_campaign_type(params)
    return self._call(f'{prefix}{self.resource}', params)

  def list_ex(self, params: base.Params = None) -> api_response.ApiResponse:
    prefix = self._client_prefix()
    return self._call(f'{prefix}{self.resource}/extended', params)


class BiddableKeywords(_KeywordResource):
  """Calls to `keywords` resource."""

  resource = 'keywords'
  strip_campaign_type_on_list = True


class NegativeKeywords(_KeywordResource):
  """Calls to `negativeKeywords` resource."""

  resource = 'negativeKeywords'


class CampaignNegativeKeywords(_KeywordResource):
  """Calls to `campaignNegativeKeywords` resource.

  Archiving is not supported by the API, keywords are removed instead.
  """

  resource = 'campaignNegativeKeywords'

  def remove(self, keyword_id: str | int) -> api_response.ApiResponse:
    return self.archive(keyword_id)
