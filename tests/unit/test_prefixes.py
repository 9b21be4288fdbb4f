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

from amzn_ads import exceptions, prefixes


class TestResolvePathPrefix:
  def test_legacy_api_has_no_prefix(self):
    assert prefixes.resolve_path_prefix('v1', 'sp') == ''

  def test_legacy_api_does_not_require_type(self):
    assert prefixes.resolve_path_prefix('v1', None) == ''

  @pytest.mark.parametrize('campaign_type', ['sp', 'hsa', 'sb', 'sd'])
  def test_versioned_api_prefixes_path_with_type(self, campaign_type):
    prefix = prefixes.resolve_path_prefix('v2', campaign_type)

    assert prefix == f'{campaign_type}/'

  @pytest.mark.parametrize('campaign_type', [None, ''])
  def test_versioned_api_raises_error_without_type(self, campaign_type):
    with pytest.raises(exceptions.NoTypeSetError):
      prefixes.resolve_path_prefix('v2', campaign_type)


@pytest.mark.parametrize(
  'campaign_type, expected',
  [
    ('sponsoredProducts', 'sp'),
    ('sponsoredBrands', 'hsa'),
    ('sponsoredDisplay', None),
    (None, None),
  ],
)
def test_campaign_type_to_prefix(campaign_type, expected):
  assert prefixes.campaign_type_to_prefix(campaign_type) == expected


def test_campaign_type_to_prefix_returns_default_for_unknown_type():
  assert prefixes.campaign_type_to_prefix('unknown', 'hsa') == 'hsa'


@pytest.mark.parametrize(
  'report_type, expected',
  [
    (None, 'sp'),
    ('sponsoredProducts', 'sp'),
    ('sponsoredBrands', 'sb'),
    ('sponsoredDisplay', 'sd'),
  ],
)
def test_report_type_to_prefix(report_type, expected):
  assert prefixes.report_type_to_prefix(report_type) == expected


def test_report_type_to_prefix_raises_error_on_unknown_type():
  with pytest.raises(exceptions.InvalidReportTypeError):
    prefixes.report_type_to_prefix('sponsoredTelevision')
