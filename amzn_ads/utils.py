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
"""Module for various utility functions."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any
from urllib import parse


def encode_params(params: Mapping[str, Any]) -> str:
  """Joins params as `key=value&...` keeping insertion order.

  Every value is percent-encoded with no safe characters, so the result
  never contains unescaped separators.

  Args:
      params: Parameters to encode.

  Returns:
      Encoded parameters without trailing separator.
  """
  return '&'.join(
    f'{key}={parse.quote(format_value(value), safe="")}'
    for key, value in params.items()
  )


def format_value(value: Any) -> str:
  """Converts parameter value to its string representation.

  Sequences are joined with commas (`stateFilter=enabled,paused`),
  mappings are serialized as JSON and booleans are lowercased.
  """
  if isinstance(value, bool):
    return str(value).lower()
  if isinstance(value, Mapping):
    return json.dumps(value)
  if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
    return ','.join(format_value(element) for element in value)
  return str(value)
