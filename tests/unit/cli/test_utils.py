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

import datetime

import pytest
from dateutil import relativedelta

from amzn_ads.cli import utils


def test_convert_date():
  current_date = datetime.date.today()
  current_year = datetime.date(current_date.year, 1, 1)
  current_month = datetime.date(current_date.year, current_date.month, 1)
  last_year = current_year - relativedelta.relativedelta(years=1)
  last_month = current_month - relativedelta.relativedelta(months=1)
  yesterday = current_date - relativedelta.relativedelta(days=1)

  assert utils.convert_date('20220101') == '20220101'
  assert utils.convert_date(':YYYY') == current_year.strftime('%Y%m%d')
  assert utils.convert_date(':YYYYMM') == current_month.strftime('%Y%m%d')
  assert utils.convert_date(':YYYYMMDD') == current_date.strftime('%Y%m%d')
  assert utils.convert_date(':YYYY-1') == last_year.strftime('%Y%m%d')
  assert utils.convert_date(':YYYYMM-1') == last_month.strftime('%Y%m%d')
  assert utils.convert_date(':YYYYMMDD-1') == yesterday.strftime('%Y%m%d')


def test_convert_date_with_custom_format():
  yesterday = datetime.date.today() - relativedelta.relativedelta(days=1)

  converted = utils.convert_date(':YYYYMMDD-1', date_format='%Y-%m-%d')

  assert converted == yesterday.strftime('%Y-%m-%d')


@pytest.mark.parametrize('date_string', [':YYYYMMDD-N', ':YYYYWW-1'])
def test_wrong_convert_date(date_string):
  with pytest.raises(ValueError):
    utils.convert_date(date_string)
