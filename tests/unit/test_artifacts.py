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
from __future__ import annotations

import gzip
import json
import os

import pytest
import requests

from amzn_ads import artifacts, exceptions, transport
from amzn_ads import response as api_response
from tests.unit import helpers

_LOCATION = 'https://advertising-api.amazon.com/v1/reports/r1/download'
_STORAGE_URL = 'https://storage.example.com/r1.json.gz?signature=abc'
_REPORT = [{'campaignId': 1, 'impressions': 100, 'clicks': 3}]


def _ready_report():
  return helpers.json_response(
    {'reportId': 'r1', 'status': 'SUCCESS', 'location': _LOCATION}
  )


class TestArtifactRetriever:
  @pytest.fixture
  def retriever(self, client):
    return artifacts.ArtifactRetriever(client)

  def test_get_report_returns_metadata_while_in_progress(
    self, retriever, fake_transport
  ):
    fake_transport.add(
      helpers.json_response({'reportId': 'r1', 'status': 'IN_PROGRESS'})
    )

    response = retriever.get_report('r1')

    assert response.json() == {'reportId': 'r1', 'status': 'IN_PROGRESS'}
    assert [request.url for request in fake_transport.requests] == [
      'https://advertising-api.amazon.com/v1/reports/r1'
    ]

  def test_get_report_returns_failed_status_unchanged(
    self, retriever, fake_transport
  ):
    fake_transport.add(
      helpers.json_response({'reportId': 'r1', 'status': 'FAILURE'})
    )

    response = retriever.get_report('r1')

    assert response.json()['status'] == 'FAILURE'
    assert len(fake_transport.requests) == 1

  def test_get_report_returns_api_error_unchanged(
    self, retriever, fake_transport
  ):
    fake_transport.add(
      helpers.json_response({'requestId': 'E1'}, status_code=404)
    )

    response = retriever.get_report('r1')

    assert not response.success
    assert response.request_id == 'E1'

  def test_get_report_downloads_and_decompresses_ready_report(
    self, retriever, fake_transport
  ):
    fake_transport.add(
      _ready_report(),
      helpers.redirect(_STORAGE_URL),
      helpers.gzipped(_REPORT),
    )

    response = retriever.get_report('r1')

    assert response.success
    assert response.response_type is None
    assert json.loads(response.response) == _REPORT
    download, redirected = fake_transport.requests[1:]
    assert download.url == _LOCATION
    assert 'Authorization' in download.headers
    assert redirected.url == _STORAGE_URL
    assert 'Authorization' not in redirected.headers

  def test_get_snapshot_downloads_ready_snapshot(
    self, retriever, fake_transport
  ):
    snapshot = [{'keywordId': 7}]
    fake_transport.add(
      helpers.json_response(
        {
          'snapshotId': 's1',
          'status': 'SUCCESS',
          'location': 'https://advertising-api.amazon.com/v1/snapshots/s1/'
          'download',
        }
      ),
      helpers.redirect(_STORAGE_URL),
      helpers.gzipped(snapshot),
    )

    response = retriever.get_snapshot('s1')

    assert fake_transport.requests[0].url.endswith('/v1/snapshots/s1')
    assert json.loads(response.response) == snapshot

  def test_get_report_saves_file_when_save_file_is_enabled(
    self, make_client, fake_transport, tmp_path
  ):
    client = make_client(saveFile=True, downloadDir=str(tmp_path))
    fake_transport.add(
      _ready_report(),
      helpers.redirect(_STORAGE_URL),
      helpers.gzipped(_REPORT),
    )

    response = artifacts.ArtifactRetriever(client).get_report('r1')

    assert response.success
    assert response.response_type == 'file'
    assert os.path.dirname(response.response) == str(tmp_path)
    with open(response.response, 'rb') as f:
      assert json.loads(f.read()) == _REPORT
    assert list(tmp_path.glob('*.gz')) == []
    assert fake_transport.requests[2].follow_redirects

  def test_get_report_removes_compressed_file_on_failed_download(
    self, make_client, fake_transport, tmp_path
  ):
    client = make_client(saveFile=True, downloadDir=str(tmp_path))
    fake_transport.add(
      _ready_report(),
      helpers.redirect(_STORAGE_URL),
      helpers.json_response({'requestId': 'S3ERR'}, status_code=403),
    )

    response = artifacts.ArtifactRetriever(client).get_report('r1')

    assert not response.success
    assert response.code == 403
    assert response.request_id == 'S3ERR'
    assert response.response_type is None
    assert list(tmp_path.iterdir()) == []

  def test_get_report_removes_partial_files_on_corrupt_archive(
    self, make_client, fake_transport, tmp_path
  ):
    client = make_client(saveFile=True, downloadDir=str(tmp_path))
    fake_transport.add(
      _ready_report(),
      helpers.redirect(_STORAGE_URL),
      transport.HttpResponse(status_code=200, body=b'\x1f\x8bnotgzipatall'),
    )

    with pytest.raises((OSError, EOFError)):
      artifacts.ArtifactRetriever(client).get_report('r1')
    assert list(tmp_path.iterdir()) == []

  def test_get_report_removes_compressed_file_when_transport_fails(
    self, make_client, fake_transport, tmp_path
  ):
    client = make_client(saveFile=True, downloadDir=str(tmp_path))
    fake_transport.add(
      _ready_report(),
      helpers.redirect(_STORAGE_URL),
      requests.ConnectionError('Connection reset by peer'),
    )

    with pytest.raises(requests.ConnectionError):
      artifacts.ArtifactRetriever(client).get_report('r1')
    assert list(tmp_path.iterdir()) == []

  def test_repeated_downloads_are_saved_to_distinct_files(
    self, make_client, fake_transport, tmp_path
  ):
    client = make_client(saveFile=True, downloadDir=str(tmp_path))
    for _ in range(2):
      fake_transport.add(
        helpers.redirect(_STORAGE_URL), helpers.gzipped(_REPORT)
      )

    first = client.operation('reports/r1/download')
    second = client.operation('reports/r1/download')

    assert first.response != second.response
    assert sorted(str(path) for path in tmp_path.iterdir()) == sorted(
      [first.response, second.response]
    )

  def test_get_report_saves_body_decoded_by_http_layer(
    self, make_client, fake_transport, tmp_path
  ):
    client = make_client(saveFile=True, downloadDir=str(tmp_path))
    fake_transport.add(
      _ready_report(),
      helpers.redirect(_STORAGE_URL),
      helpers.json_response(_REPORT),
    )

    response = artifacts.ArtifactRetriever(client).get_report('r1')

    assert response.response_type == 'file'
    with open(response.response, 'rb') as f:
      assert json.loads(f.read()) == _REPORT
    assert list(tmp_path.glob('*.gz')) == []

  def test_request_report_on_legacy_api_keeps_report_type(
    self, retriever, fake_transport
  ):
    fake_transport.add(
      helpers.json_response({'reportId': 'r1', 'status': 'IN_PROGRESS'})
    )
    params = {'reportType': 'sponsoredBrands', 'reportDate': '20240101'}

    retriever.request_report('campaigns', params)

    request = fake_transport.requests[0]
    assert request.method == 'POST'
    assert request.url.endswith('/v1/campaigns/report')
    assert json.loads(request.body) == params

  @pytest.mark.parametrize(
    'report_type, prefix',
    [
      (None, 'sp'),
      ('sponsoredProducts', 'sp'),
      ('sponsoredBrands', 'sb'),
      ('sponsoredDisplay', 'sd'),
    ],
  )
  def test_request_report_on_versioned_api_uses_report_type_prefix(
    self, client_v2, fake_transport, report_type, prefix
  ):
    fake_transport.add(helpers.json_response({'reportId': 'r1'}))
    params = {'reportDate': '20240101', 'metrics': 'impressions'}
    if report_type:
      params['reportType'] = report_type

    artifacts.ArtifactRetriever(client_v2).request_report('keywords', params)

    request = fake_transport.requests[0]
    assert request.url == (
      f'https://advertising-api.amazon.com/v2/{prefix}/keywords/report'
    )
    assert json.loads(request.body) == {
      'reportDate': '20240101',
      'metrics': 'impressions',
    }
    assert params.get('reportType') == report_type

  def test_request_report_raises_error_on_invalid_report_type(
    self, client_v2, fake_transport
  ):
    with pytest.raises(exceptions.InvalidReportTypeError):
      artifacts.ArtifactRetriever(client_v2).request_report(
        'campaigns', {'reportType': 'sponsoredVideo'}
      )

    assert fake_transport.requests == []

  def test_request_snapshot_posts_to_record_type(
    self, retriever, fake_transport
  ):
    fake_transport.add(
      helpers.json_response({'snapshotId': 's1', 'status': 'IN_PROGRESS'})
    )

    response = retriever.request_snapshot(
      'keywords', {'stateFilter': 'enabled'}
    )

    request = fake_transport.requests[0]
    assert request.method == 'POST'
    assert request.url.endswith('/v1/keywords/snapshot')
    assert response.json()['snapshotId'] == 's1'


class TestArtifactFiles:
  def test_temporary_artifact_path_is_unique(self, tmp_path):
    first = artifacts.temporary_artifact_path(str(tmp_path))
    second = artifacts.temporary_artifact_path(str(tmp_path))

    assert first != second
    assert first.endswith(artifacts.ARTIFACT_SUFFIX)
    assert os.path.dirname(first) == str(tmp_path)

  def test_extract_file_writes_file_without_gz_suffix(self, tmp_path):
    compressed = tmp_path / 'report_amzn_ads_.json.gz'
    compressed.write_bytes(gzip.compress(b'[1, 2, 3]'))

    extracted = artifacts.extract_file(str(compressed))

    assert extracted == str(tmp_path / 'report_amzn_ads_.json')
    with open(extracted, 'rb') as f:
      assert f.read() == b'[1, 2, 3]'

  def test_descriptor_from_non_json_response_is_none(self):
    response = api_response.ApiResponse(
      success=True, code=200, response='not json'
    )

    assert artifacts.ArtifactDescriptor.from_response(response) is None
