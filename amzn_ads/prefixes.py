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
"""Module for resolving ad type prefixes of versioned API paths.

Legacy API (v1) uses unprefixed paths (`campaigns`), newer versions prefix
paths with an ad type segment (`sp/campaigns`, `hsa/campaigns`).
"""

from __future__ import annotations

import logging
from typing import Final

from amzn_ads import exceptions

logger = logging.getLogger(__name__)

LEGACY_API_VERSION: Final = 'v1'
SPONSORED_PRODUCTS: Final = 'sponsoredProducts'
SPONSORED_BRANDS: Final = 'sponsoredBrands'
SPONSORED_DISPLAY: Final = 'sponsoredDisplay'

_CAMPAIGN_TYPE_PREFIXES: Final = {
  SPONSORED_PRODUCTS: 'sp',
  SPONSORED_BRANDS: 'hsa',
}
_REPORT_TYPE_PREFIXES: Final = {
  SPONSORED_PRODUCTS: 'sp',
  SPONSORED_BRANDS: 'sb',
  SPONSORED_DISPLAY: 'sd',
}


def is_legacy(api_version: str) -> bool:
  return api_version == LEGACY_API_VERSION


def resolve_path_prefix(api_version: str, campaign_type: str | None) -> str:
  """Builds path prefix for a given API version and ad type.

  Args:
      api_version: Version of Amazon Ads API.
      campaign_type: Ad type prefix (sp, hsa, sb, sd).

  Returns:
      Empty string for legacy API, `{campaign_type}/` otherwise.

  Raises:
      NoTypeSetError: When non legacy API is used without ad type.
  """
  if is_legacy(api_version):
    return ''
  if not campaign_type:
    logger.error('Unable to perform request. No type is set')
    raise exceptions.NoTypeSetError('Unable to perform request. No type is set')
  return f'{campaign_type}/'


def campaign_type_to_prefix(
  campaign_type: str | None, default: str | None = None
) -> str | None:
  """Maps campaignType tag (sponsoredProducts, ...) to path prefix."""
  return _CAMPAIGN_TYPE_PREFIXES.get(campaign_type, default)


def report_type_to_prefix(report_type: str | None) -> str:
  """Maps reportType tag to path prefix.

  Args:
      report_type: Report type tag, sponsoredProducts if omitted.

  Returns:
      One of sp, sb, sd.

  Raises:
      InvalidReportTypeError: When report type is not supported.
  """
  report_type = report_type or SPONSORED_PRODUCTS
  if not (prefix := _REPORT_TYPE_PREFIXES.get(report_type)):
    raise exceptions.InvalidReportTypeError(
      f'Invalid reportType {report_type}'
    )
  return prefix
