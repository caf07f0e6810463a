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

import math
from typing import Any

from .constants import (
    FINAL_LAT_PRECISION,
    FINAL_LNG_PRECISION,
    LATITUDE_MAX,
    LONGITUDE_MAX,
)

LAT_INT_RANGE = 2 * LATITUDE_MAX * FINAL_LAT_PRECISION
LNG_INT_RANGE = 2 * LONGITUDE_MAX * FINAL_LNG_PRECISION


def to_number(value: Any, name: str = "value") -> float:
    """Coerce a coordinate (or anything float() accepts) into a finite float.

    Raises ValueError if the value is not a number."""
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{name} is not a number: {value!r}") from e

    if not math.isfinite(number):
        raise ValueError(f"{name} is not a finite number: {value!r}")
    return number


def clip_latitude(latitude: float) -> float:
    """Clip a latitude into the range -90 to 90."""
    return min(LATITUDE_MAX, max(-LATITUDE_MAX, latitude))


def normalize_longitude(longitude: float) -> float:
    """Normalize a longitude into the range -180 to 180, not including 180."""
    # python's modulo is always non-negative for a positive divisor
    return (longitude + LONGITUDE_MAX) % (2 * LONGITUDE_MAX) - LONGITUDE_MAX


def location_to_integers(latitude: float, longitude: float) -> tuple[int, int]:
    """
    Convert a latitude, longitude location into non-negative integers at the
    finest precision of the code.

    Latitude is clipped into the range 0 <= x < 180 * 2.5e7. Latitude 90 is
    pulled down by one unit so that the resulting code can also be decoded.
    Longitude is wrapped into the range 0 <= x < 360 * 8.192e6.
    """
    lat_val = math.floor(latitude * FINAL_LAT_PRECISION)
    lat_val += LATITUDE_MAX * FINAL_LAT_PRECISION
    if lat_val < 0:
        lat_val = 0
    elif lat_val >= LAT_INT_RANGE:
        lat_val = LAT_INT_RANGE - 1

    lng_val = math.floor(longitude * FINAL_LNG_PRECISION)
    lng_val += LONGITUDE_MAX * FINAL_LNG_PRECISION
    lng_val %= LNG_INT_RANGE

    return lat_val, lng_val
