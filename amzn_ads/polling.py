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
"""Module for waiting until report or snapshot is generated."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Final

import tenacity

from amzn_ads import exceptions
from amzn_ads import response as api_response

logger = logging.getLogger(__name__)

PENDING_STATUSES: Final = frozenset({'IN_PROGRESS', 'PENDING'})


def is_pending(response: api_response.ApiResponse) -> bool:
  """Checks whether response is metadata of not yet generated artifact."""
  if not response.success or response.response_type == 'file':
    return False
  if isinstance(response.response, bytes):
    return False
  data = api_response.parse_json(response.response)
  return isinstance(data, dict) and data.get('status') in PENDING_STATUSES


def wait_for_artifact(
  fetch: Callable[[], api_response.ApiResponse],
  max_attempts: int = 30,
  wait_seconds: float = 10,
  max_wait_seconds: float = 120,
) -> api_response.ApiResponse:
  """Calls `fetch` until artifact is no longer pending.

  Args:
      fetch: Callable returning artifact, i.e. `retriever.get_report`
          bound to a report id with `functools.partial`.
      max_attempts: Maximum number of calls to `fetch`.
      wait_seconds: Initial wait between calls, grows exponentially.
      max_wait_seconds: Maximum wait between calls.

  Returns:
      First response which is not pending (downloaded artifact, failed
      artifact metadata or API error).

  Raises:
      ArtifactNotReadyError: When artifact is pending after all attempts.
  """
  retrying = tenacity.Retrying(
    stop=tenacity.stop_after_attempt(max_attempts),
    wait=tenacity.wait_exponential(min=wait_seconds, max=max_wait_seconds),
    retry=tenacity.retry_if_result(is_pending),
    before_sleep=tenacity.before_sleep_log(logger, logging.INFO),
    retry_error_callback=_raise_not_ready,
  )
  return retrying(fetch)


def _raise_not_ready(retry_state: tenacity.RetryCallState) -> None:
  raise exceptions.ArtifactNotReadyError(
    f'Artifact is not ready after {retry_state.attempt_number} attempts'
  )
