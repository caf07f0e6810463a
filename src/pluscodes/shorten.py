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
    ENCODING_BASE,
    LATITUDE_MAX,
    MIN_TRIMMABLE_CODE_LEN,
    PADDING_CHARACTER,
    PAIR_RESOLUTIONS,
    SEPARATOR,
    SEPARATOR_POSITION,
    SHORTEN_SAFETY_FACTOR,
)
from .coordinates import clip_latitude, normalize_longitude, to_number
from .decode import decode
from .encode import encode
from .logger import get_logger
from .validity import InvalidCodeError, is_full, is_short

logger = get_logger(__name__)


def _reference_location(latitude: Any, longitude: Any) -> tuple[float, float]:
    latitude = to_number(latitude, "reference latitude")
    longitude = to_number(longitude, "reference longitude")
    return clip_latitude(latitude), normalize_longitude(longitude)


def shorten(code: str, latitude: Any, longitude: Any) -> str:
    """
    Remove characters from the start of a full code, as long as the result
    still recovers to the same code relative to the reference location.

    The number of characters removed depends on how close the reference
    location is to the center of the code's area.

    :param code: an unpadded full code of at least 6 digits
    :param latitude: reference latitude
    :param longitude: reference longitude
    :return: the shortened code, or the full code (upper-cased) if the
      reference is too far away to remove any characters
    :raises InvalidCodeError: if the code is not full, is padded or is too short
    :raises ValueError: if the reference location is not numeric
    """
    if not is_full(code):
        raise InvalidCodeError("Passed code is not valid and full", code)
    if PADDING_CHARACTER in code:
        raise InvalidCodeError("Cannot shorten padded codes", code)

    code = code.upper()
    code_area = decode(code)
    if code_area.code_length < MIN_TRIMMABLE_CODE_LEN:
        raise InvalidCodeError(
            f"Code length must be at least {MIN_TRIMMABLE_CODE_LEN}", code
        )

    latitude, longitude = _reference_location(latitude, longitude)

    # distance from the code center to the reference, in the worse axis
    code_range = max(
        abs(code_area.latitude_center - latitude),
        abs(code_area.longitude_center - longitude),
    )
    for i in range(len(PAIR_RESOLUTIONS) - 2, 0, -1):
        if code_range < PAIR_RESOLUTIONS[i] * SHORTEN_SAFETY_FACTOR:
            logger.debug(f"Shortening {code} by {(i + 1) * 2} digits, range {code_range}")
            return code[(i + 1) * 2:]
    return code


def recover_nearest(short_code: str, reference_latitude: Any, reference_longitude: Any) -> str:
    """
    Recover the full code nearest to the reference location that matches a
    short code.

    Full codes are returned upper-cased and otherwise unchanged.

    :raises InvalidCodeError: if the code is neither full nor a valid short code
    :raises ValueError: if the reference location is not numeric
    """
    if is_full(short_code):
        return short_code.upper()
    if not is_short(short_code):
        raise InvalidCodeError("Passed short code is not valid", short_code)

    reference_latitude, reference_longitude = _reference_location(
        reference_latitude, reference_longitude
    )

    short_code = short_code.upper()
    # number of leading digits missing from the short code
    padding_length = SEPARATOR_POSITION - short_code.find(SEPARATOR)
    # size in degrees of the area covered by the missing digits
    resolution = ENCODING_BASE ** (2 - padding_length / 2)
    half_resolution = resolution / 2.0

    # use the reference location to fill in the missing digits
    prefix = encode(reference_latitude, reference_longitude)[:padding_length]
    code_area = decode(prefix + short_code)

    # if the candidate is more than half a cell from the reference, the
    # neighbouring cell is closer. latitude must stay within -90 to 90.
    lat_center, lng_center = code_area.latlng()
    if (
        reference_latitude + half_resolution < lat_center
        and lat_center - resolution >= -LATITUDE_MAX
    ):
        lat_center -= resolution
    elif (
        reference_latitude - half_resolution > lat_center
        and lat_center + resolution <= LATITUDE_MAX
    ):
        lat_center += resolution

    if reference_longitude + half_resolution < lng_center:
        lng_center -= resolution
    elif reference_longitude - half_resolution > lng_center:
        lng_center += resolution

    if (lat_center, lng_center) != code_area.latlng():
        logger.debug(f"Recovered {short_code} moved to neighbouring cell ({lat_center}, {lng_center})")

    return encode(lat_center, lng_center, code_area.code_length)
