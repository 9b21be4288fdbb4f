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
"""Module for executing HTTP requests.

BaseTransport is the only place where network I/O happens; the client
depends on its interface so that tests can substitute a fake one.
"""

from __future__ import annotations

import abc
import dataclasses
import logging
from collections.abc import Mapping
from typing import Any, BinaryIO, Final

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT: Final = 60
_CHUNK_SIZE: Final = 64 * 1024
_REQUEST_ID_HEADERS: Final = (
  'x-amzn-RequestId',
  'x-amz-request-id',
  'x-amz-rid',
)


@dataclasses.dataclass
class HttpRequest:
  """Single HTTP request.

  Attributes:
      url: Fully qualified URL including query string.
      method: HTTP verb.
      headers: Request headers.
      body: Request body, None when request has no body.
      follow_redirects: Whether transport should follow redirects itself.
  """

  url: str
  method: str = 'GET'
  headers: dict[str, str] = dataclasses.field(default_factory=dict)
  body: str | bytes | None = None
  follow_redirects: bool = False


@dataclasses.dataclass
class HttpResponse:
  """Raw result of HTTP request.

  Attributes:
      status_code: HTTP status code.
      body: Response body; empty when body was streamed to a file.
      info: Transport metadata (http_code, url, redirect_url, total_time,
          content_type).
      request_id: Request identifier taken from response headers.
  """

  status_code: int
  body: bytes = b''
  info: dict[str, Any] = dataclasses.field(default_factory=dict)
  request_id: str | None = None


class BaseTransport(abc.ABC):
  """Interface for executing HTTP requests."""

  @abc.abstractmethod
  def execute(
    self, request: HttpRequest, destination: BinaryIO | None = None
  ) -> HttpResponse:
    """Executes request.

    Args:
        request: Request to execute.
        destination: File object where response body is streamed to;
            body is kept in memory if omitted.

    Returns:
        Response status, body and metadata.
    """


class RequestsTransport(BaseTransport):
  """Executes requests via `requests.Session`.

  Attributes:
      session: Session used for connection pooling.
      timeout: Timeout in seconds for connect and read operations.
  """

  def __init__(
    self,
    session: requests.Session | None = None,
    timeout: float | tuple[float, float] = DEFAULT_TIMEOUT,
  ) -> None:
    self.session = session or requests.Session()
    self.timeout = timeout

  def execute(
    self, request: HttpRequest, destination: BinaryIO | None = None
  ) -> HttpResponse:
    logger.debug('%s %s', request.method, request.url)
    with self.session.request(
      method=request.method,
      url=request.url,
      headers=request.headers,
      data=request.body,
      allow_redirects=request.follow_redirects,
      stream=destination is not None,
      timeout=self.timeout,
    ) as response:
      if destination is not None:
        for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
          destination.write(chunk)
        body = b''
      else:
        body = response.content
      return HttpResponse(
        status_code=response.status_code,
        body=body,
        info={
          'http_code': response.status_code,
          'url': response.url,
          'redirect_url': response.headers.get('Location'),
          'total_time': response.elapsed.total_seconds(),
          'content_type': response.headers.get('Content-Type'),
        },
        request_id=_get_request_id(response.headers),
      )


def _get_request_id(headers: Mapping[str, str]) -> str | None:
  for header in _REQUEST_ID_HEADERS:
    if request_id := headers.get(header):
      return request_id
  return None
