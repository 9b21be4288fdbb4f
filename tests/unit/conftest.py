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
from __future__ import annotations

import pytest

from amzn_ads import api_clients
from tests.unit import helpers


@pytest.fixture
def config_dict():
  return {
    'clientId': helpers.CLIENT_ID,
    'clientSecret': helpers.CLIENT_SECRET,
    'region': 'na',
    'accessToken': helpers.ACCESS_TOKEN,
    'refreshToken': helpers.REFRESH_TOKEN,
    'sandbox': False,
  }


@pytest.fixture
def fake_transport():
  return helpers.FakeTransport()


@pytest.fixture
def make_client(config_dict, fake_transport):
  """Builds client talking to fake transport with overridden config."""

  def _make_client(**overrides):
    return api_clients.AmznAdsApiClient(
      config_dict={**config_dict, **overrides},
      transport_client=fake_transport,
    )

  return _make_client


@pytest.fixture
def client(make_client):
  return make_client()


@pytest.fixture
def client_v2(make_client):
  return make_client(apiVersion='v2')
