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
"""Module for defining and validating client configuration.

ClientConfig can be built from a dictionary, a YAML string, a YAML file
stored locally or remotely, or environment variables.
"""

from __future__ import annotations

import dataclasses
import logging
import os
import re
from pathlib import Path
from typing import Any, Final

import smart_open
import yaml

from amzn_ads import exceptions

logger = logging.getLogger(__name__)

DEFAULT_API_VERSION: Final = 'v1'
CONFIG_SECTION: Final = 'amzn_ads'

_CLIENT_ID_PATTERN: Final = re.compile(
  r'^amzn1\.application-oa2-client\.[a-z0-9]{32}$', re.IGNORECASE
)
_CLIENT_SECRET_PATTERN: Final = re.compile(r'^[a-z0-9]{64}$', re.IGNORECASE)
_ACCESS_TOKEN_PATTERN: Final = re.compile(r'^Atza(\||%7C|%7c).*$')
_REFRESH_TOKEN_PATTERN: Final = re.compile(r'^Atzr(\||%7C|%7c).*$')

_CAMEL_CASE_KEYS: Final = {
  'clientId': 'client_id',
  'clientSecret': 'client_secret',
  'accessToken': 'access_token',
  'refreshToken': 'refresh_token',
  'saveFile': 'save_file',
  'apiVersion': 'api_version',
  'downloadDir': 'download_dir',
}
_OPTIONAL_FIELDS: Final = ('access_token', 'refresh_token', 'download_dir')


def _fail(error: exceptions.ConfigError) -> None:
  logger.error(str(error))
  raise error


@dataclasses.dataclass(frozen=True)
class ClientConfig:
  """Stores credentials and settings of Amazon Ads API client.

  Attributes:
      client_id: Login with Amazon application id.
      client_secret: Login with Amazon application secret.
      region: Advertising region (na, eu, fe).
      access_token: Initial access token.
      refresh_token: Refresh token used to obtain access tokens.
      sandbox: Whether to send requests to sandbox hosts.
      save_file: Whether downloaded artifacts are saved to disk.
      api_version: Version of Amazon Ads API (v1 or v2).
      download_dir: Folder for downloaded artifacts, temp folder if empty.
  """

  client_id: str | None = None
  client_secret: str | None = None
  region: str | None = None
  access_token: str | None = None
  refresh_token: str | None = None
  sandbox: bool = False
  save_file: bool = False
  api_version: str = DEFAULT_API_VERSION
  download_dir: str | None = None

  def __post_init__(self) -> None:
    """Ensures that all parameters are present and correctly formatted."""
    for field in dataclasses.fields(self):
      if (
        getattr(self, field.name) is None
        and field.name not in _OPTIONAL_FIELDS
      ):
        _fail(
          exceptions.MissingParameterError(
            f"Missing required parameter '{field.name}'."
          )
        )
    if not _CLIENT_ID_PATTERN.match(str(self.client_id)):
      _fail(
        exceptions.InvalidParameterError(
          'Invalid parameter value for client_id.'
        )
      )
    if not _CLIENT_SECRET_PATTERN.match(str(self.client_secret)):
      _fail(
        exceptions.InvalidParameterError(
          'Invalid parameter value for client_secret.'
        )
      )
    if self.access_token is not None and not _ACCESS_TOKEN_PATTERN.match(
      str(self.access_token)
    ):
      _fail(
        exceptions.InvalidParameterError(
          'Invalid parameter value for access_token.'
        )
      )
    if self.refresh_token is not None and not _REFRESH_TOKEN_PATTERN.match(
      str(self.refresh_token)
    ):
      _fail(
        exceptions.InvalidParameterError(
          'Invalid parameter value for refresh_token.'
        )
      )
    for flag in ('sandbox', 'save_file'):
      if not isinstance(getattr(self, flag), bool):
        _fail(
          exceptions.InvalidParameterError(
            f'Invalid parameter value for {flag}.'
          )
        )

  @classmethod
  def from_dict(cls, config_parameters: dict[str, Any] | None) -> ClientConfig:
    """Builds config from camelCase or snake_case parameters.

    Args:
        config_parameters: Mapping with config parameters.

    Returns:
        Validated config.

    Raises:
        ConfigError: When mapping is empty, contains unknown keys or
            invalid values.
    """
    if config_parameters is None:
      _fail(exceptions.MissingParameterError("'config' cannot be None."))
    known_fields = {field.name for field in dataclasses.fields(cls)}
    parameters = {}
    for key, value in config_parameters.items():
      name = _CAMEL_CASE_KEYS.get(key, key)
      if name not in known_fields:
        _fail(
          exceptions.UnknownParameterError(
            f"Unknown parameter '{key}' in config."
          )
        )
      parameters[name] = value
    if parameters.get('api_version') is None:
      parameters.pop('api_version', None)
    return cls(**parameters)

  @classmethod
  def from_yaml_string(cls, yaml_str: str) -> ClientConfig:
    """Builds config from YAML with optional `amzn_ads` section."""
    return cls.from_dict(_extract_section(yaml.safe_load(yaml_str)))

  @classmethod
  def from_yaml_file(
    cls,
    path: str | os.PathLike[str] | None = None,
  ) -> ClientConfig:
    """Builds config from a local or remote YAML file.

    Args:
        path: Path to config file; taken from
            AMZN_ADS_CONFIGURATION_FILE_PATH or ~/amzn-ads.yaml if omitted.

    Returns:
        Validated config.
    """
    path = path or default_config_path()
    with smart_open.open(path, 'r', encoding='utf-8') as f:
      config_dict = yaml.safe_load(f)
    return cls.from_dict(_extract_section(config_dict))

  @classmethod
  def from_env(cls, prefix: str = 'AMZN_ADS_') -> ClientConfig:
    """Builds config from environment variables (AMZN_ADS_CLIENT_ID, ...)."""
    parameters: dict[str, Any] = {}
    for field in dataclasses.fields(cls):
      if (value := os.getenv(f'{prefix}{field.name.upper()}')) is None:
        continue
      if field.name in ('sandbox', 'save_file'):
        value = value.strip().lower() in ('1', 'true', 'yes')
      parameters[field.name] = value
    return cls.from_dict(parameters)


def default_config_path() -> str:
  return os.getenv(
    'AMZN_ADS_CONFIGURATION_FILE_PATH', str(Path.home() / 'amzn-ads.yaml')
  )


def _extract_section(config_dict: dict[str, Any] | None) -> dict[str, Any]:
  if isinstance(config_dict, dict) and isinstance(
    config_dict.get(CONFIG_SECTION), dict
  ):
    return config_dict[CONFIG_SECTION]
  return config_dict
