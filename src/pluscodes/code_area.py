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

from attrs import frozen

from .constants import LATITUDE_MAX, LONGITUDE_MAX


@frozen
class CodeArea:
    """The area represented by a decoded code: the bounding box between the
    lower left and upper right corners, and the number of digits used."""

    latitude_lo: float
    """Latitude of the SW corner in degrees."""
    longitude_lo: float
    """Longitude of the SW corner in degrees."""
    latitude_hi: float
    """Latitude of the NE corner in degrees."""
    longitude_hi: float
    """Longitude of the NE corner in degrees."""
    code_length: int
    """Number of significant digits in the decoded code."""

    @property
    def latitude_center(self) -> float:
        """Latitude of the center of the area, never above 90."""
        return min(
            self.latitude_lo + (self.latitude_hi - self.latitude_lo) / 2,
            LATITUDE_MAX,
        )

    @property
    def longitude_center(self) -> float:
        """Longitude of the center of the area, never above 180."""
        return min(
            self.longitude_lo + (self.longitude_hi - self.longitude_lo) / 2,
            LONGITUDE_MAX,
        )

    def latlng(self) -> tuple[float, float]:
        return self.latitude_center, self.longitude_center

    def bounds(self) -> tuple[float, float, float, float]:
        """(lat_lo, lng_lo, lat_hi, lng_hi) of the area."""
        return self.latitude_lo, self.longitude_lo, self.latitude_hi, self.longitude_hi
