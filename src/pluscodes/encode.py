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

from typing import Any

from .constants import (
    CODE_ALPHABET,
    CODE_PRECISION_NORMAL,
    ENCODING_BASE,
    GRID_CODE_LENGTH,
    GRID_COLUMNS,
    GRID_ROWS,
    MAX_DIGIT_COUNT,
    MIN_DIGIT_COUNT,
    PADDING_CHARACTER,
    PAIR_CODE_LENGTH,
    SEPARATOR,
    SEPARATOR_POSITION,
)
from .coordinates import location_to_integers, to_number
from .logger import get_logger

logger = get_logger(__name__)


def normalize_code_length(code_length: Any = None) -> int:
    """Resolve a requested code length, defaulting to normal precision and
    clamping to the maximum digit count.

    Raises ValueError if the length can't be encoded: below the minimum, or
    odd within the pair section."""
    if code_length is None:
        return CODE_PRECISION_NORMAL

    if isinstance(code_length, bool) or not isinstance(code_length, int):
        length = to_number(code_length, "code_length")
        if not length.is_integer():
            raise ValueError(f"Invalid Open Location Code length: {code_length}")
        code_length = int(length)

    code_length = min(MAX_DIGIT_COUNT, code_length)
    if code_length < MIN_DIGIT_COUNT or (code_length < PAIR_CODE_LENGTH and code_length % 2 == 1):
        raise ValueError(f"Invalid Open Location Code length: {code_length}")
    return code_length


def encode_integers(lat_int: int, lng_int: int, code_length: int | None = None) -> str:
    """
    Encode a location given as integers at the finest precision (as produced
    by location_to_integers) into a code of the requested length.
    """
    code_length = normalize_code_length(code_length)

    code = [""] * (MAX_DIGIT_COUNT + 1)
    code[SEPARATOR_POSITION] = SEPARATOR

    if code_length > PAIR_CODE_LENGTH:
        # grid digits, least significant first
        for i in range(GRID_CODE_LENGTH, 0, -1):
            lat_digit = lat_int % GRID_ROWS
            lng_digit = lng_int % GRID_COLUMNS
            code[SEPARATOR_POSITION + 2 + i] = CODE_ALPHABET[lat_digit * GRID_COLUMNS + lng_digit]
            lat_int //= GRID_ROWS
            lng_int //= GRID_COLUMNS
    else:
        # discard the unused grid precision
        lat_int //= GRID_ROWS ** GRID_CODE_LENGTH
        lng_int //= GRID_COLUMNS ** GRID_CODE_LENGTH

    # the pair after the separator
    code[SEPARATOR_POSITION + 1] = CODE_ALPHABET[lat_int % ENCODING_BASE]
    code[SEPARATOR_POSITION + 2] = CODE_ALPHABET[lng_int % ENCODING_BASE]
    lat_int //= ENCODING_BASE
    lng_int //= ENCODING_BASE

    # the remaining pairs before the separator
    for j in range(PAIR_CODE_LENGTH // 2 + 1, -1, -2):
        code[j] = CODE_ALPHABET[lat_int % ENCODING_BASE]
        code[j + 1] = CODE_ALPHABET[lng_int % ENCODING_BASE]
        lat_int //= ENCODING_BASE
        lng_int //= ENCODING_BASE

    if code_length >= SEPARATOR_POSITION:
        return "".join(code[:code_length + 1])

    padding = PADDING_CHARACTER * (SEPARATOR_POSITION - code_length)
    return "".join(code[:code_length]) + padding + SEPARATOR


def encode(latitude: Any, longitude: Any, code_length: int | None = None) -> str:
    """
    Encode a location into an Open Location Code.

    :param latitude: latitude in signed decimal degrees, clipped to the
      range -90 to 90
    :param longitude: longitude in signed decimal degrees, normalised to the
      range -180 to 180
    :param code_length: number of significant digits in the code, defaults
      to CODE_PRECISION_NORMAL
    :return: the code
    :raises ValueError: if the inputs are not numbers or the length is invalid
    """
    latitude = to_number(latitude, "latitude")
    longitude = to_number(longitude, "longitude")
    code_length = normalize_code_length(code_length)

    lat_int, lng_int = location_to_integers(latitude, longitude)
    logger.debug(f"Encoding ({latitude}, {longitude}) at length {code_length}")
    return encode_integers(lat_int, lng_int, code_length)
