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
"""Contains helpers classes to simulate Amazon Ads API responses."""

from __future__ import annotations

import copy
import dataclasses
import gzip
import json
from typing import Any, BinaryIO

from amzn_ads import transport

CLIENT_ID = 'amzn1.application-oa2-client.' + '0123456789abcdef' * 2
CLIENT_SECRET = '0123456789abcdef' * 4
ACCESS_TOKEN = 'Atza|IwEBIAccessToken'
REFRESH_TOKEN = 'Atzr|IwEBIRefreshToken'
PARTIAL_BODY = gzip.compress(b'[{"campaignId": 1}]')[:10]


class FakeTransport(transport.BaseTransport):
  """Returns queued responses and records executed requests.

  Queued exceptions are raised after part of the body is written to
  destination, as if connection dropped mid download.

  Attributes:
    responses: Responses (or exceptions) returned in order of `execute`
      calls.
    requests: Copies of executed requests.
  """

  def __init__(self, *responses: transport.HttpResponse | Exception) -> None:
    self.responses = list(responses)
    self.requests: list[transport.HttpRequest] = []

  def add(self, *responses: transport.HttpResponse | Exception) -> None:
    self.responses.extend(responses)

  def execute(
    self,
    request: transport.HttpRequest,
    destination: BinaryIO | None = None,
  ) -> transport.HttpResponse:
    self.requests.append(copy.deepcopy(request))
    response = self.responses.pop(0)
    if isinstance(response, Exception):
      if destination is not None:
        destination.write(PARTIAL_BODY)
      raise response
    if destination is None:
      return response
    destination.write(response.body)
    return dataclasses.replace(response, body=b'')


def json_response(
  data: Any, status_code: int = 200, request_id: str | None = None
) -> transport.HttpResponse:
  """Builds response with JSON body."""
  return transport.HttpResponse(
    status_code=status_code,
    body=json.dumps(data).encode('utf-8'),
    info={'http_code': status_code, 'content_type': 'application/json'},
    request_id=request_id,
  )


def redirect(location: str) -> transport.HttpResponse:
  return transport.HttpResponse(
    status_code=307,
    info={'http_code': 307, 'redirect_url': location},
  )


def gzipped(data: Any, status_code: int = 200) -> transport.HttpResponse:
  """Builds response with gzip compressed JSON body."""
  return transport.HttpResponse(
    status_code=status_code,
    body=gzip.compress(json.dumps(data).encode('utf-8')),
    info={'http_code': status_code},
  )
