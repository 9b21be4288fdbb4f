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

# pylint: disable=C0330, g-bad-import-order, g-multiple-import

"""Module for defining client to interact with Amazon Ads API."""

from __future__ import annotations

import gzip
import json
import logging
import os
import re
from collections.abc import Mapping
from typing import Any, Final

import amzn_ads
from amzn_ads import artifacts, auth, exceptions, regions, transport, utils
from amzn_ads import config as client_config
from amzn_ads import response as api_response

logger = logging.getLogger(__name__)

VERBS: Final = ('GET', 'POST', 'PUT', 'DELETE')
_SUCCESS_CODE: Final = re.compile(r'^(2|3)\d{2}$')
_TEMPORARY_REDIRECT: Final = 307


class BaseClient:
  """Base API client class.

  Resource modules depend only on this interface, so any object providing
  `operation` (a fake in tests, for example) can be used instead of
  AmznAdsApiClient.

  Attributes:
      api_version: Version of Amazon Ads API to use.
      campaign_type_prefix: Default ad type prefix (sp or hsa) for
          resources that do not take campaign type from parameters.
  """

  def __init__(
    self,
    api_version: str = client_config.DEFAULT_API_VERSION,
    campaign_type_prefix: str | None = None,
  ) -> None:
    self.api_version = api_version
    self.campaign_type_prefix = campaign_type_prefix

  def operation(
    self,
    path: str,
    params: Mapping[str, Any] | list[Any] | None = None,
    verb: str = 'GET',
  ) -> api_response.ApiResponse:
    """Performs a single call to the API."""
    raise NotImplementedError

  def download(
    self, location: str, gunzip: bool = False
  ) -> api_response.ApiResponse:
    """Fetches artifact from a given location."""
    raise NotImplementedError

  def refresh_token(self) -> api_response.ApiResponse:
    """Exchanges refresh token for a new access token."""
    raise NotImplementedError


class AmznAdsApiClient(BaseClient):
  """Client to interact with Amazon Ads API.

  The client is not thread-safe: a refresh replaces the session access
  token in place.

  Attributes:
      config: Validated client config.
      session: Endpoints, current access token and profile.
      headers: Headers of the last call made via `operation`.
      user_agent: Value of User-Agent header.
  """

  def __init__(
    self,
    config: client_config.ClientConfig | None = None,
    config_dict: dict[str, Any] | None = None,
    yaml_str: str | None = None,
    path_to_config: str | os.PathLike[str] | None = None,
    transport_client: transport.BaseTransport | None = None,
    profile_id: str | int | None = None,
    campaign_type_prefix: str | None = None,
  ) -> None:
    """Initializes AmznAdsApiClient based on one of the config sources.

    If config contains refresh token but no access token, the token is
    refreshed immediately.

    Args:
        config: Instantiated config.
        config_dict: A dictionary with config parameters.
        yaml_str: String representation of config file.
        path_to_config: Path to local or remote config file.
        transport_client: Transport used to execute HTTP requests.
        profile_id: Advertiser profile sent as scope header.
        campaign_type_prefix: Default ad type prefix (sp or hsa).

    Raises:
        ConfigError: When config is missing or invalid.
        AuthError: When initial token refresh fails.
    """
    self.config = config or self._init_config(
      config_dict=config_dict, yaml_str=yaml_str, path=path_to_config
    )
    super().__init__(
      api_version=self.config.api_version,
      campaign_type_prefix=campaign_type_prefix,
    )
    self.user_agent = (
      f'AdvertisingAPI Python Client Library v{amzn_ads.__version__}'
    )
    endpoints = regions.resolve_endpoints(
      self.config.region, self.config.sandbox, self.config.api_version
    )
    self.session = auth.Session(
      endpoint=endpoints.api_url,
      token_url=endpoints.token_url,
      access_token=self.config.access_token,
      profile_id=profile_id,
    )
    self.headers: dict[str, str] = {}
    self._transport = transport_client or transport.RequestsTransport()
    self._token_manager = auth.TokenManager(
      config=self.config,
      session=self.session,
      execute=self.execute_request,
      user_agent=self.user_agent,
    )
    if self.session.access_token is None and self.config.refresh_token:
      self.refresh_token()

  def _init_config(
    self,
    config_dict: dict[str, Any] | None = None,
    yaml_str: str | None = None,
    path: str | os.PathLike[str] | None = None,
  ) -> client_config.ClientConfig:
    """Builds config from the first provided source.

    Falls back to file from AMZN_ADS_CONFIGURATION_FILE_PATH
    (or ~/amzn-ads.yaml) when nothing is provided.
    """
    if config_dict is not None:
      return client_config.ClientConfig.from_dict(config_dict)
    if yaml_str:
      return client_config.ClientConfig.from_yaml_string(yaml_str)
    return client_config.ClientConfig.from_yaml_file(path)

  @property
  def access_token(self) -> str | None:
    return self.session.access_token

  def set_access_token(self, access_token: str) -> None:
    self.session.access_token = access_token

  @property
  def profile_id(self) -> str | int | None:
    return self.session.profile_id

  def set_profile_id(self, profile_id: str | int | None) -> None:
    """Sets advertiser profile used as scope for subsequent calls."""
    self.session.profile_id = profile_id

  def refresh_token(self) -> api_response.ApiResponse:
    """Exchanges refresh token for a new access token.

    Returns:
        Response of token endpoint.

    Raises:
        AuthError: When token cannot be refreshed.
    """
    return self._token_manager.refresh()

  def operation(
    self,
    path: str,
    params: Mapping[str, Any] | list[Any] | None = None,
    verb: str = 'GET',
  ) -> api_response.ApiResponse:
    """Performs authenticated call to the API.

    Args:
        path: Resource path relative to versioned endpoint.
        params: Query parameters for GET, JSON body for other verbs.
        verb: One of GET, POST, PUT, DELETE.

    Returns:
        Normalized response; remote errors have `success=False`.

    Raises:
        UnknownVerbError: When verb is not supported.
    """
    method = str(verb).upper()
    if method not in VERBS:
      logger.error('Unknown verb %s.', verb)
      raise exceptions.UnknownVerbError(f'Unknown verb {verb}.')
    headers = self._build_headers(authorize=True)
    headers['Content-Type'] = 'application/json'
    headers['Amazon-Advertising-API-ClientId'] = self.config.client_id
    self.headers = headers

    url = f'{self.session.endpoint.rstrip("/")}/{path}'
    body = None
    if method == 'GET':
      if params:
        url = f'{url}?{utils.encode_params(params)}'
    elif params:
      body = json.dumps(params)
    logger.debug('Calling %s %s', method, url)
    return self.execute_request(
      transport.HttpRequest(
        url=url, method=method, headers=dict(headers), body=body
      )
    )

  def download(
    self, location: str, gunzip: bool = False
  ) -> api_response.ApiResponse:
    """Fetches data from a given location.

    In gunzip mode (used for redirects to storage URLs) authorization
    header is not sent since redirect target is pre-signed.

    Args:
        location: URL to fetch.
        gunzip: Whether response body is a gzip compressed artifact.

    Returns:
        Response with decompressed artifact (or path to it when `save_file`
        is enabled) in gunzip mode, plain response otherwise.
    """
    request = transport.HttpRequest(
      url=location, headers=self._build_headers(authorize=not gunzip)
    )
    logger.debug('Downloading %s (gunzip=%s)', location, gunzip)
    if gunzip and self.config.save_file:
      return self._save_downloaded(request)
    if not gunzip:
      return self.execute_request(request)
    return self.execute_request(request, decode=False, gunzip=True)

  def execute_request(
    self,
    request: transport.HttpRequest,
    decode: bool = True,
    gunzip: bool = False,
  ) -> api_response.ApiResponse:
    """Executes request and classifies the response.

    HTTP 307 is never returned: its redirect target is downloaded instead.

    Args:
        request: Request to execute.
        decode: Whether body should be decoded as UTF-8 text.
        gunzip: Whether gzip body of successful response is decompressed;
            body already decoded by HTTP layer is kept as is.

    Returns:
        Normalized response.

    Raises:
        MissingRedirectLocationError: When HTTP 307 has no Location header.
    """
    http_response = self._transport.execute(request)
    if http_response.status_code == _TEMPORARY_REDIRECT:
      redirect_url = http_response.info.get('redirect_url')
      if not redirect_url:
        logger.error('Redirect from %s has no location.', request.url)
        raise exceptions.MissingRedirectLocationError(
          f'Redirect from {request.url} has no location.'
        )
      logger.debug('Following redirect to %s', redirect_url)
      return self.download(redirect_url, gunzip=True)
    response = classify(http_response, decode=decode)
    if (
      gunzip
      and response.success
      and artifacts.is_gzipped(response.response)
    ):
      response.response = gzip.decompress(response.response)
    return response

  def _save_downloaded(
    self, request: transport.HttpRequest
  ) -> api_response.ApiResponse:
    """Saves artifact to disk and extracts it.

    Compressed file is removed regardless of the outcome.
    """
    request.follow_redirects = True
    file_path = artifacts.temporary_artifact_path(self.config.download_dir)
    try:
      with open(file_path, 'wb') as f:
        http_response = self._transport.execute(request, destination=f)
      if not is_success(http_response.status_code):
        with open(file_path, 'rb') as f:
          http_response.body = f.read()
        return classify(http_response)
      response = classify(http_response)
      response.response = artifacts.extract_file(file_path)
      response.response_type = 'file'
      logger.info('Artifact saved to %s', response.response)
      return response
    finally:
      if os.path.exists(file_path):
        os.remove(file_path)

  def _build_headers(self, authorize: bool) -> dict[str, str]:
    headers = {}
    if authorize:
      headers['Authorization'] = f'bearer {self.session.access_token}'
    headers['User-Agent'] = self.user_agent
    if self.session.profile_id is not None:
      headers['Amazon-Advertising-API-Scope'] = str(self.session.profile_id)
    return headers


def is_success(status_code: int) -> bool:
  return bool(_SUCCESS_CODE.match(str(status_code)))


def classify(
  http_response: transport.HttpResponse, decode: bool = True
) -> api_response.ApiResponse:
  """Converts raw HTTP response to ApiResponse.

  Args:
      http_response: Response returned by transport.
      decode: Whether body should be decoded as UTF-8 text.

  Returns:
      Response with `success` flag and request id.
  """
  body = http_response.body
  if decode and isinstance(body, bytes):
    body = body.decode('utf-8', errors='replace')
  if not is_success(http_response.status_code):
    return api_response.ApiResponse(
      success=False,
      code=http_response.status_code,
      response=body,
      response_info=http_response.info,
      request_id=(
        api_response.extract_request_id(http_response.body)
        or api_response.DEFAULT_REQUEST_ID
      ),
    )
  return api_response.ApiResponse(
    success=True,
    code=http_response.status_code,
    response=body,
    response_info=http_response.info,
    request_id=(
      http_response.request_id
      or api_response.extract_request_id(http_response.body)
      or api_response.DEFAULT_REQUEST_ID
    ),
  )
