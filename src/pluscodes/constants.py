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

# Parameters of the Open Location Code format. All derived values are exact
# integer powers; every encode and decode relies on them being exact.

SEPARATOR = "+"
"""Breaks the code into two parts to aid memorability."""

SEPARATOR_POSITION = 8
"""Number of characters placed before the separator in a full code."""

PADDING_CHARACTER = "0"
"""Used to pad codes shorter than SEPARATOR_POSITION."""

CODE_ALPHABET = "23456789CFGHJMPQRVWX"
"""Character set used to encode values, chosen to avoid spelling words and
to avoid characters that are easily confused."""

ENCODING_BASE = len(CODE_ALPHABET)

LATITUDE_MAX = 90
LONGITUDE_MAX = 180

MIN_DIGIT_COUNT = 2
"""Minimum number of significant digits in a code."""

MAX_DIGIT_COUNT = 15
"""Maximum number of significant digits that are processed in a code."""

PAIR_CODE_LENGTH = 10
"""Maximum code length using lat/lng pair encoding. The area of such a code
is approximately 13x13 meters at the equator."""

PAIR_FIRST_PLACE_VALUE = ENCODING_BASE ** (PAIR_CODE_LENGTH // 2 - 1)
"""Place value of the first pair, if the last pair has a value of 1."""

PAIR_PRECISION = ENCODING_BASE ** 3
"""Inverse of the precision of the pair section, in degrees."""

PAIR_RESOLUTIONS = (20.0, 1.0, 0.05, 0.0025, 0.000125)
"""Size in degrees of each position in the pair section."""

GRID_CODE_LENGTH = MAX_DIGIT_COUNT - PAIR_CODE_LENGTH
GRID_COLUMNS = 4
GRID_ROWS = 5

GRID_LAT_FIRST_PLACE_VALUE = GRID_ROWS ** (GRID_CODE_LENGTH - 1)
GRID_LNG_FIRST_PLACE_VALUE = GRID_COLUMNS ** (GRID_CODE_LENGTH - 1)

FINAL_LAT_PRECISION = PAIR_PRECISION * GRID_ROWS ** GRID_CODE_LENGTH
"""Multiply latitude by this to get an integer at the finest precision."""

FINAL_LNG_PRECISION = PAIR_PRECISION * GRID_COLUMNS ** GRID_CODE_LENGTH
"""Multiply longitude by this to get an integer at the finest precision."""

MIN_TRIMMABLE_CODE_LEN = 6
"""Minimum length of a code that can be shortened."""

SHORTEN_SAFETY_FACTOR = 0.3
"""Fraction of a cell the reference may be from a code and still allow that
cell's digits to be dropped."""

CODE_PRECISION_NORMAL = 10
"""Normal precision code, approximately 14x14 meters."""

CODE_PRECISION_EXTRA = 11
"""Extra precision code, approximately 2x3 meters."""
