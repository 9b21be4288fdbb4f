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
"""Defines ApiResponse, a normalized result of a single API call."""

from __future__ import annotations

import dataclasses
import json
from typing import Any

DEFAULT_REQUEST_ID = '0'


@dataclasses.dataclass
class ApiResponse:
  """Result of a single call to Amazon Ads API.

  Remote errors are not raised, they are returned with `success=False` so
  callers can branch on `code` and `request_id`.

  Attributes:
      success: Whether HTTP status is in 2xx or 3xx range.
      code: HTTP status code.
      response: Response body; bytes for in-memory artifacts, path to a
          decompressed file when `response_type` is 'file'.
      response_info: Transport metadata (http_code, url, redirect_url,
          total_time, content_type).
      request_id: Request identifier reported by the API, '0' if unknown.
      response_type: 'file' when `response` is a path to a local file.
  """

  success: bool
  code: int
  response: str | bytes | None = None
  response_info: dict[str, Any] = dataclasses.field(default_factory=dict)
  request_id: str = DEFAULT_REQUEST_ID
  response_type: str | None = None

  def json(self) -> Any:
    """Parses response body as JSON.

    Raises:
        ValueError: When body is not a valid JSON document.
    """
    return json.loads(self.response)

  def to_dict(self) -> dict[str, Any]:
    return dataclasses.asdict(self)


def parse_json(body: str | bytes | None) -> Any | None:
  """Parses body as JSON, returns None when it is empty or malformed."""
  if not body:
    return None
  try:
    return json.loads(body)
  except ValueError:
    return None


def extract_request_id(body: str | bytes | None) -> str | None:
  """Gets `requestId` field from JSON object body if present."""
  data = parse_json(body)
  if isinstance(data, dict) and (request_id := data.get('requestId')):
    return str(request_id)
  return None
