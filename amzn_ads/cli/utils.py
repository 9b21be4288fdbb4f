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
"""Module for various helpers for executing amzn_ads as CLI tool."""

from __future__ import annotations

import datetime
import logging
import re
import sys
from typing import Final

from dateutil import relativedelta
from rich import logging as rich_logging

REPORT_DATE_FORMAT: Final = '%Y%m%d'

_DATE_MACRO: Final = re.compile(r'^(:YYYY(?:MM)?(?:DD)?)(?:-(.*))?$')
# Macro -> unit of lookback period.
_MACRO_UNITS: Final = {
  ':YYYY': 'years',
  ':YYYYMM': 'months',
  ':YYYYMMDD': 'days',
}
_QUIET_LOGGERS: Final = (
  'smart_open.smart_open_lib',
  'urllib3.connectionpool',
)


def convert_date(
  date_string: str | None, date_format: str = REPORT_DATE_FORMAT
) -> str | None:
  """Converts report date macros to actual dates.

  Supported macros are :YYYY (first day of year), :YYYYMM (first day of
  month) and :YYYYMMDD (today); each accepts a lookback in its own unit,
  i.e. :YYYYMMDD-1 is yesterday and :YYYYMM-1 is first day of last month.

  Args:
      date_string: Date or macro.
      date_format: Format of converted date.

  Returns:
      Converted date or unchanged string if it is not a macro.

  Raises:
      ValueError: If macro or its lookback value is incorrect.
  """
  if not date_string or ':YYYY' not in date_string:
    return date_string
  if not (match := _DATE_MACRO.match(date_string)) or (
    match.group(1) not in _MACRO_UNITS
  ):
    raise ValueError(f'Unsupported date macro {date_string}')
  macro, lookback = match.groups()
  if lookback is None:
    lookback = '0'
  if not lookback.isdigit():
    raise ValueError(
      'Must provide numeric value for a number lookback period, '
      'i.e. :YYYYMMDD-1'
    )
  today = datetime.date.today()
  anchors = {
    ':YYYY': today.replace(month=1, day=1),
    ':YYYYMM': today.replace(day=1),
    ':YYYYMMDD': today,
  }
  delta = relativedelta.relativedelta(**{_MACRO_UNITS[macro]: int(lookback)})
  return (anchors[macro] - delta).strftime(date_format)


def init_logging(
  loglevel: str = 'INFO', logger_type: str = 'local', name: str = __name__
) -> logging.Logger:
  """Configures root logger for CLI run.

  Args:
      loglevel: Name of logging level.
      logger_type: 'rich' for colored output, plain stdout otherwise.
      name: Name of returned logger.

  Returns:
      Logger to be used by CLI.
  """
  if logger_type == 'rich':
    handler = rich_logging.RichHandler(rich_tracebacks=True)
    log_format = '%(message)s'
  else:
    handler = logging.StreamHandler(sys.stdout)
    log_format = '[%(asctime)s][%(name)s][%(levelname)s] %(message)s'
  logging.basicConfig(
    format=log_format,
    level=loglevel,
    datefmt='%Y-%m-%d %H:%M:%S',
    handlers=[handler],
  )
  for quiet_logger in _QUIET_LOGGERS:
    logging.getLogger(quiet_logger).setLevel(logging.WARNING)
  return logging.getLogger(name)
