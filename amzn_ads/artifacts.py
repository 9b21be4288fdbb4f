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
"""Module for retrieving reports and snapshots.

Reports and snapshots are generated asynchronously:

1. POST request creates an artifact and returns its id.
2. GET request returns artifact status; once status is SUCCESS it contains
   a location of the artifact.
3. Location responds with HTTP 307 to a pre-signed storage URL serving a
   gzip compressed JSON document.

ArtifactRetriever hides steps 2 and 3 behind a single call; polling
cadence is left to the caller (see `amzn_ads.polling`).
"""

from __future__ import annotations

import dataclasses
import logging
import os
import shutil
import tempfile
import uuid
from typing import TYPE_CHECKING, Any, Final

import smart_open
import smart_open.compression

from amzn_ads import prefixes
from amzn_ads import response as api_response

if TYPE_CHECKING:
  from amzn_ads import api_clients

logger = logging.getLogger(__name__)

SUCCESS_STATUS: Final = 'SUCCESS'
GZIP_MAGIC: Final = b'\x1f\x8b'
ARTIFACT_SUFFIX: Final = '_amzn_ads_.json.gz'
_BUFFER_SIZE: Final = 4096


@dataclasses.dataclass(frozen=True)
class ArtifactDescriptor:
  """Metadata of report or snapshot.

  Attributes:
      id: Report or snapshot id.
      status: Generation status (IN_PROGRESS, SUCCESS, FAILURE, ...).
      location: Download URL, present once status is SUCCESS.
  """

  id: str | None
  status: str | None
  location: str | None = None

  @property
  def is_ready(self) -> bool:
    return self.status == SUCCESS_STATUS

  @classmethod
  def from_response(
    cls, response: api_response.ApiResponse
  ) -> ArtifactDescriptor | None:
    """Parses descriptor from response, None if body is not JSON object."""
    data = api_response.parse_json(response.response)
    if not isinstance(data, dict):
      return None
    return cls(
      id=data.get('reportId') or data.get('snapshotId'),
      status=data.get('status'),
      location=data.get('location'),
    )


class ArtifactRetriever:
  """Requests and downloads reports and snapshots.

  Attributes:
      api_client: Client used to call the API.
  """

  def __init__(self, api_client: api_clients.BaseClient) -> None:
    self.api_client = api_client

  def request_report(
    self, record_type: str, params: dict[str, Any] | None = None
  ) -> api_response.ApiResponse:
    """Requests report generation.

    Args:
        record_type: Entity to report on (campaigns, adGroups, keywords, ...).
        params: Report parameters; `reportType` selects ad type
            (sponsoredProducts by default).

    Returns:
        Response with report id and status.

    Raises:
        InvalidReportTypeError: When reportType is not supported.
        NoTypeSetError: When ad type cannot be resolved.
    """
    params = dict(params) if params else None
    prefix = prefixes.report_type_to_prefix(
      params.get('reportType') if params else None
    )
    if not prefixes.is_legacy(self.api_client.api_version) and params:
      params.pop('reportType', None)
    path_prefix = prefixes.resolve_path_prefix(
      self.api_client.api_version, prefix
    )
    return self.api_client.operation(
      f'{path_prefix}{record_type}/report', params, 'POST'
    )

  def get_report(self, report_id: str) -> api_response.ApiResponse:
    """Gets report status and downloads it once generated.

    Args:
        report_id: Id of requested report.

    Returns:
        Downloaded report if it is ready, report metadata otherwise.
    """
    return self._fetch(f'reports/{report_id}')

  def request_snapshot(
    self, record_type: str, params: dict[str, Any] | None = None
  ) -> api_response.ApiResponse:
    """Requests snapshot of all entities of a given record type."""
    return self.api_client.operation(f'{record_type}/snapshot', params, 'POST')

  def get_snapshot(self, snapshot_id: str) -> api_response.ApiResponse:
    """Gets snapshot status and downloads it once generated."""
    return self._fetch(f'snapshots/{snapshot_id}')

  def _fetch(self, path: str) -> api_response.ApiResponse:
    response = self.api_client.operation(path)
    if not response.success:
      return response
    descriptor = ArtifactDescriptor.from_response(response)
    if descriptor and descriptor.is_ready:
      logger.debug('Artifact %s is ready, downloading', descriptor.id)
      return self.api_client.download(descriptor.location)
    logger.debug(
      'Artifact %s is not ready: %s',
      path,
      descriptor.status if descriptor else None,
    )
    return response


def temporary_artifact_path(download_dir: str | None = None) -> str:
  """Generates unique path for a compressed artifact."""
  return os.path.join(
    download_dir or tempfile.gettempdir(),
    f'{uuid.uuid4().hex}{ARTIFACT_SUFFIX}',
  )


def is_gzipped(data: bytes) -> bool:
  return data[:2] == GZIP_MAGIC


def extract_file(file_path: str) -> str:
  """Decompresses gzip file to a sibling file without `.gz` suffix.

  Body already decoded by HTTP layer (Content-Encoding: gzip) is copied
  as is. Partially written sibling file is removed if extraction fails.

  Args:
      file_path: Path to `*.gz` file.

  Returns:
      Path to decompressed file.
  """
  unzip_file_path = file_path.removesuffix('.gz')
  with open(file_path, 'rb') as f:
    compression = (
      smart_open.compression.INFER_FROM_EXTENSION
      if is_gzipped(f.read(2))
      else smart_open.compression.NO_COMPRESSION
    )
  try:
    with smart_open.open(
      file_path, 'rb', compression=compression
    ) as source, open(unzip_file_path, 'wb') as destination:
      shutil.copyfileobj(source, destination, _BUFFER_SIZE)
  except Exception:
    if os.path.exists(unzip_file_path):
      os.remove(unzip_file_path)
    raise
  return unzip_file_path
