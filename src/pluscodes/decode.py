#
# Copyright 2025 The Superpower Institute Ltd.
# Copyright 2014 Google Inc. All rights reserved.
# Copyright 2025 Google Inc., Open Location Code Contributors, Erik Michelson.
#
# This file is part of pluscodes.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

from .code_area import CodeArea
from .constants import (
    CODE_ALPHABET,
    ENCODING_BASE,
    FINAL_LAT_PRECISION,
    FINAL_LNG_PRECISION,
    GRID_COLUMNS,
    GRID_LAT_FIRST_PLACE_VALUE,
    GRID_LNG_FIRST_PLACE_VALUE,
    GRID_ROWS,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    MAX_DIGIT_COUNT,
    PADDING_CHARACTER,
    PAIR_CODE_LENGTH,
    PAIR_FIRST_PLACE_VALUE,
    PAIR_PRECISION,
    SEPARATOR,
)
from .validity import InvalidCodeError, is_full


def decode(code: str) -> CodeArea:
    """
    Decode a full Open Location Code into the area it represents.

    The pair and grid sections are accumulated separately as integers, and
    only converted to degrees and combined at the end.

    :raises InvalidCodeError: if the code is not a valid full code
    """
    if not is_full(code):
        raise InvalidCodeError("Passed Plus Code is not a valid full code", code)

    digits = code.replace(SEPARATOR, "").replace(PADDING_CHARACTER, "").upper()

    normal_lat = -LATITUDE_MAX * PAIR_PRECISION
    normal_lng = -LONGITUDE_MAX * PAIR_PRECISION
    grid_lat = 0
    grid_lng = 0

    pair_digits = min(len(digits), PAIR_CODE_LENGTH)
    place_value = PAIR_FIRST_PLACE_VALUE
    for i in range(0, pair_digits, 2):
        normal_lat += CODE_ALPHABET.index(digits[i]) * place_value
        normal_lng += CODE_ALPHABET.index(digits[i + 1]) * place_value
        if i < pair_digits - 2:
            place_value //= ENCODING_BASE

    lat_precision = place_value / PAIR_PRECISION
    lng_precision = place_value / PAIR_PRECISION

    if len(digits) > PAIR_CODE_LENGTH:
        row_place_value = GRID_LAT_FIRST_PLACE_VALUE
        col_place_value = GRID_LNG_FIRST_PLACE_VALUE
        grid_digits = min(len(digits), MAX_DIGIT_COUNT)
        for k in range(PAIR_CODE_LENGTH, grid_digits):
            value = CODE_ALPHABET.index(digits[k])
            row, col = divmod(value, GRID_COLUMNS)
            grid_lat += row * row_place_value
            grid_lng += col * col_place_value
            if k < grid_digits - 1:
                row_place_value //= GRID_ROWS
                col_place_value //= GRID_COLUMNS

        lat_precision = row_place_value / FINAL_LAT_PRECISION
        lng_precision = col_place_value / FINAL_LNG_PRECISION

    lat = normal_lat / PAIR_PRECISION + grid_lat / FINAL_LAT_PRECISION
    lng = normal_lng / PAIR_PRECISION + grid_lng / FINAL_LNG_PRECISION
    return CodeArea(
        latitude_lo=lat,
        longitude_lo=lng,
        latitude_hi=lat + lat_precision,
        longitude_hi=lng + lng_precision,
        code_length=min(len(digits), MAX_DIGIT_COUNT),
    )
