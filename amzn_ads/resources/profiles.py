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
"""Module for managing advertiser profiles."""

from __future__ import annotations

from amzn_ads import response as api_response
from amzn_ads.resources import base


class Profiles(base.BaseResource):
  """Calls to `profiles` resource."""

  def list_profiles(self) -> api_response.ApiResponse:
    return self._call('profiles')

  def register_profile(self, data: base.Payload) -> api_response.ApiResponse:
    """Registers sandbox profile."""
    return self._call('profiles/register', data, 'PUT')

  def register_profile_status(
    self, profile_id: str | int
  ) -> api_response.ApiResponse:
    return self._call(f'profiles/register/{profile_id}/status')

  def get_profile(self, profile_id: str | int) -> api_response.ApiResponse:
    return self._call(f'profiles/{profile_id}')

  def update_profiles(self, data: base.Payload) -> api_response.ApiResponse:
    return self._call('profiles', data, 'PUT')
