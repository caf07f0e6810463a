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

# String grammar checks for codes. None of these decode the code numerically,
# apart from the range check of the first two characters in is_full.

import re

from .constants import (
    CODE_ALPHABET,
    ENCODING_BASE,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    PADDING_CHARACTER,
    SEPARATOR,
    SEPARATOR_POSITION,
)

_PADDING_RUN = re.compile(f"{PADDING_CHARACTER}+")
_CODE_CHARACTERS = frozenset(CODE_ALPHABET + CODE_ALPHABET.lower())


class InvalidCodeError(ValueError):
    """A code was not valid for the requested operation."""

    def __init__(self, message: str, code: str):
        super().__init__(f"{message}: {code}")
        self.code = code


def get_alphabet() -> str:
    return CODE_ALPHABET


def is_valid(code: str) -> bool:
    """
    Determines if a code is valid.

    To be valid, all characters must be from the code alphabet with exactly
    one separator, which can be at any even position up to the eighth digit.
    Padding characters may only appear as a single even-length run directly
    before a separator at position 8.
    """
    if not code or not isinstance(code, str):
        return False

    separator_position = code.find(SEPARATOR)
    if (
        # the separator is required
        separator_position == -1
        or separator_position != code.rfind(SEPARATOR)
        or len(code) == 1
        or separator_position > SEPARATOR_POSITION
        or separator_position % 2 == 1
    ):
        return False

    padding_position = code.find(PADDING_CHARACTER)
    if padding_position > -1:
        padding_runs = _PADDING_RUN.findall(code)
        if (
            # short codes cannot be padded
            separator_position < SEPARATOR_POSITION
            or padding_position == 0
            or len(padding_runs) > 1
            or len(padding_runs[0]) % 2 == 1
            or len(padding_runs[0]) > SEPARATOR_POSITION - 2
            # a padded code must end with the separator
            or not code.endswith(SEPARATOR)
        ):
            return False

    # a single character after the separator is not legal
    if len(code) - separator_position - 1 == 1:
        return False

    digits = code.replace(SEPARATOR, "").replace(PADDING_CHARACTER, "")
    return all(c in _CODE_CHARACTERS for c in digits)


def is_short(code: str) -> bool:
    """
    Determines if a code is a valid short code, one that can be produced by
    removing leading digits from a full code.
    """
    if not is_valid(code):
        return False
    return 0 <= code.find(SEPARATOR) < SEPARATOR_POSITION


def is_full(code: str) -> bool:
    """
    Determines if a code is a valid full code, representing a latitude and
    longitude within range.
    """
    if not is_valid(code) or is_short(code):
        return False

    # the first latitude character must not decode to 90 degrees or more
    first_lat_value = CODE_ALPHABET.find(code[0].upper()) * ENCODING_BASE
    if first_lat_value >= LATITUDE_MAX * 2:
        return False

    if len(code) > 1:
        # and the first longitude character to 180 degrees or more
        first_lng_value = CODE_ALPHABET.find(code[1].upper()) * ENCODING_BASE
        if first_lng_value >= LONGITUDE_MAX * 2:
            return False
    return True
