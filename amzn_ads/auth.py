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
"""Module for managing session state and OAuth2 token refresh."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable
from urllib import parse

from amzn_ads import config as client_config
from amzn_ads import exceptions, transport, utils
from amzn_ads import response as api_response

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class Session:
  """Process-lifetime state of a client.

  Only `access_token` and `profile_id` change after construction.

  Attributes:
      endpoint: Base URL of resource endpoint.
      token_url: Host and path of token endpoint.
      access_token: Current access token.
      profile_id: Advertiser profile sent as scope header.
  """

  endpoint: str
  token_url: str
  access_token: str | None = None
  profile_id: str | int | None = None


class TokenManager:
  """Exchanges refresh token for access token.

  Attributes:
      config: Client config with credentials.
      session: Session where new access token is stored.
  """

  def __init__(
    self,
    config: client_config.ClientConfig,
    session: Session,
    execute: Callable[[transport.HttpRequest], api_response.ApiResponse],
    user_agent: str,
  ) -> None:
    """Initializes TokenManager.

    Args:
        config: Client config with credentials.
        session: Session where new access token is stored.
        execute: Callable that executes request and classifies response.
        user_agent: Value of User-Agent header.
    """
    self.config = config
    self.session = session
    self._execute = execute
    self._user_agent = user_agent

  def refresh(self) -> api_response.ApiResponse:
    """Obtains new access token and stores it in session.

    Returns:
        Response of token endpoint.

    Raises:
        TokenRefreshError: When response does not contain access token.
        AuthError: When config has no refresh token.
    """
    if not self.config.refresh_token:
      logger.error('Unable to refresh token. refresh_token is not set.')
      raise exceptions.AuthError(
        'Unable to refresh token. refresh_token is not set.'
      )
    params = {
      'grant_type': 'refresh_token',
      'refresh_token': parse.unquote(self.config.refresh_token),
      'client_id': self.config.client_id,
      'client_secret': self.config.client_secret,
    }
    request = transport.HttpRequest(
      url=f'https://{self.session.token_url}',
      method='POST',
      headers={
        'Content-Type': 'application/x-www-form-urlencoded;charset=UTF-8',
        'User-Agent': self._user_agent,
      },
      body=utils.encode_params(params),
    )
    response = self._execute(request)
    data = api_response.parse_json(response.response)
    if not isinstance(data, dict) or 'access_token' not in data:
      message = (
        "Unable to refresh token. 'access_token' not found in response. "
        f'{response}'
      )
      logger.error(message)
      raise exceptions.TokenRefreshError(message, response)
    self.session.access_token = data['access_token']
    logger.debug('Access token refreshed')
    return response
