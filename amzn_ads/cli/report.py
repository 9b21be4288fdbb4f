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
"""Module for defining `amzn-ads-report` CLI utility.

`amzn-ads-report` requests a report (or snapshot), waits until it is
generated and saves it to local/remote storage.
"""

from __future__ import annotations

import argparse
import dataclasses
import functools
import shutil
import sys
from typing import Any

import smart_open

from amzn_ads import (
  api_clients,
  artifacts,
  exceptions,
  polling,
)
from amzn_ads import config as client_config
from amzn_ads import response as api_response
from amzn_ads.cli import utils


def build_report_params(
  report_type: str | None = None,
  report_date: str | None = None,
  metrics: str | None = None,
  segment: str | None = None,
) -> dict[str, Any]:
  """Builds report request body from CLI arguments, skipping empty ones."""
  params = {
    'reportType': report_type,
    'reportDate': utils.convert_date(report_date) if report_date else None,
    'metrics': metrics,
    'segment': segment,
  }
  return {key: value for key, value in params.items() if value}


def save_artifact(
  response: api_response.ApiResponse, output: str | None = None
) -> str | None:
  """Writes downloaded artifact to output or stdout.

  Args:
      response: Response with downloaded artifact.
      output: Local or remote path; artifact is printed if omitted.

  Returns:
      Path where artifact was written.
  """
  if response.response_type == 'file':
    if not output:
      return response.response
    with open(response.response, 'rb') as source, smart_open.open(
      output, 'wb'
    ) as destination:
      shutil.copyfileobj(source, destination)
    return output
  content = response.response
  if isinstance(content, str):
    content = content.encode('utf-8')
  if not output:
    sys.stdout.buffer.write(content)
    return None
  with smart_open.open(output, 'wb') as f:
    f.write(content)
  return output


def main():
  parser = argparse.ArgumentParser()
  parser.add_argument('record_type')
  parser.add_argument(
    '-c',
    '--config',
    dest='config',
    default=client_config.default_config_path(),
  )
  parser.add_argument('--profile-id', dest='profile_id', default=None)
  parser.add_argument('--snapshot', dest='snapshot', action='store_true')
  parser.add_argument('--report-type', dest='report_type', default=None)
  parser.add_argument('--report-date', dest='report_date', default=None)
  parser.add_argument('--metrics', dest='metrics', default=None)
  parser.add_argument('--segment', dest='segment', default=None)
  parser.add_argument('--output', dest='output', default=None)
  parser.add_argument('--save-file', dest='save_file', action='store_true')
  parser.add_argument(
    '--poll-attempts', dest='poll_attempts', type=int, default=30
  )
  parser.add_argument(
    '--poll-interval', dest='poll_interval', type=float, default=10
  )
  parser.add_argument('--log', '--loglevel', dest='loglevel', default='info')
  parser.add_argument('--logger', dest='logger', default='local')
  parser.set_defaults(snapshot=False)
  parser.set_defaults(save_file=False)
  args = parser.parse_args()

  logger = utils.init_logging(
    loglevel=args.loglevel.upper(), logger_type=args.logger
  )
  config = client_config.ClientConfig.from_yaml_file(args.config)
  if args.save_file:
    config = dataclasses.replace(config, save_file=True)
  client = api_clients.AmznAdsApiClient(
    config=config, profile_id=args.profile_id
  )
  retriever = artifacts.ArtifactRetriever(client)

  if args.snapshot:
    response = retriever.request_snapshot(args.record_type)
    id_field, fetch = 'snapshotId', retriever.get_snapshot
  else:
    params = build_report_params(
      args.report_type, args.report_date, args.metrics, args.segment
    )
    logger.debug('report params: %s', params)
    response = retriever.request_report(args.record_type, params)
    id_field, fetch = 'reportId', retriever.get_report
  if not response.success:
    logger.error(
      'Request failed with code %d (requestId=%s): %s',
      response.code,
      response.request_id,
      response.response,
    )
    raise exceptions.AmznAdsCliException(
      f'Cannot request {args.record_type}'
    )
  artifact_id = response.json()[id_field]
  logger.info('Waiting for %s %s', id_field, artifact_id)

  response = polling.wait_for_artifact(
    functools.partial(fetch, artifact_id),
    max_attempts=args.poll_attempts,
    wait_seconds=args.poll_interval,
  )
  downloaded = response.success and (
    response.response_type == 'file' or isinstance(response.response, bytes)
  )
  if not downloaded:
    logger.error(
      '%s %s was not downloaded: %s', id_field, artifact_id, response.response
    )
    raise exceptions.AmznAdsCliException(f'Cannot download {artifact_id}')
  if destination := save_artifact(response, args.output):
    logger.info('%s %s saved to %s', id_field, artifact_id, destination)


if __name__ == '__main__':
  main()
