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
"""Module for managing portfolios."""

from __future__ import annotations

from amzn_ads import response as api_response
from amzn_ads.resources import base


class Portfolios(base.BaseResource):
  """Calls to `portfolios` resource."""

  def list_portfolios(
    self, params: base.Params = None
  ) -> api_response.ApiResponse:
    return self._call('portfolios', params)

  def list_portfolios_ex(
    self, params: base.Params = None
  ) -> api_response.ApiResponse:
    return self._call('portfolios/extended', params)

  def get_portfolio(self, portfolio_id: int) -> api_response.ApiResponse:
    return self._call(f'portfolios/{portfolio_id}')

  def get_portfolio_ex(self, portfolio_id: int) -> api_response.ApiResponse:
    return self._call(f'portfolios/extended/{portfolio_id}')

  def create_portfolios(self, data: base.Payload) -> api_response.ApiResponse:
    return self._call('portfolios', data, 'POST')

  def update_portfolios(self, data: base.Payload) -> api_response.ApiResponse:
    return self._call('portfolios', data, 'PUT')
