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
"""Module for resolving API and token endpoints for a region."""

from __future__ import annotations

import dataclasses
import logging
from typing import Final

from amzn_ads import exceptions

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class RegionHosts:
  """Hosts serving a single advertising region.

  Attributes:
      prod: Production API host.
      sandbox: Sandbox API host.
      token_url: Host and path of OAuth2 token endpoint.
  """

  prod: str
  sandbox: str
  token_url: str


REGIONS: Final[dict[str, RegionHosts]] = {
  'na': RegionHosts(
    prod='advertising-api.amazon.com',
    sandbox='advertising-api-test.amazon.com',
    token_url='api.amazon.com/auth/o2/token',
  ),
  'eu': RegionHosts(
    prod='advertising-api-eu.amazon.com',
    sandbox='advertising-api-test.amazon.com',
    token_url='api.amazon.co.uk/auth/o2/token',
  ),
  'fe': RegionHosts(
    prod='advertising-api-fe.amazon.com',
    sandbox='advertising-api-test.amazon.com',
    token_url='api.amazon.co.jp/auth/o2/token',
  ),
}


@dataclasses.dataclass(frozen=True)
class Endpoints:
  """Resolved endpoints for a client.

  Attributes:
      api_url: Base URL of resource endpoint (with API version).
      token_url: Host and path of OAuth2 token endpoint (without scheme).
  """

  api_url: str
  token_url: str


def resolve_endpoints(
  region: str, sandbox: bool = False, api_version: str = 'v1'
) -> Endpoints:
  """Maps region and sandbox flag to API and token endpoints.

  Args:
      region: Region code (na, eu, fe), case-insensitive.
      sandbox: Whether sandbox host should be used.
      api_version: API version appended to the base URL.

  Returns:
      Endpoints for a given region.

  Raises:
      InvalidRegionError: When region is not known.
  """
  region_code = str(region).lower()
  if not (hosts := REGIONS.get(region_code)):
    logger.error('Invalid region: %s', region)
    raise exceptions.InvalidRegionError(f'Invalid region: {region}')
  host = hosts.sandbox if sandbox else hosts.prod
  return Endpoints(
    api_url=f'https://{host}/{api_version.strip("/")}',
    token_url=hosts.token_url,
  )
