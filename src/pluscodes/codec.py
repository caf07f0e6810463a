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

from typing import Any, Self

from .code_area import CodeArea
from .config import PlusCodeConfig
from .constants import CODE_PRECISION_EXTRA, CODE_PRECISION_NORMAL
from .decode import decode
from .encode import encode
from .shorten import recover_nearest, shorten
from .validity import get_alphabet, is_full, is_short, is_valid


class OpenLocationCode:
    """
    All code operations in one place, using a PlusCodeConfig to fill in the
    code length and reference location when they aren't passed explicitly.
    """

    CODE_PRECISION_NORMAL = CODE_PRECISION_NORMAL
    CODE_PRECISION_EXTRA = CODE_PRECISION_EXTRA

    config: PlusCodeConfig

    def __init__(self, config: PlusCodeConfig | None = None):
        self.config = config if config is not None else PlusCodeConfig()

    @classmethod
    def from_env(cls) -> Self:
        return cls(PlusCodeConfig.from_env())

    def _reference(self, latitude: Any, longitude: Any) -> tuple[Any, Any]:
        if latitude is None and longitude is None:
            return self.config.reference()
        if latitude is None or longitude is None:
            raise ValueError("latitude and longitude must be provided together")
        return latitude, longitude

    @staticmethod
    def get_alphabet() -> str:
        return get_alphabet()

    @staticmethod
    def is_valid(code: str) -> bool:
        return is_valid(code)

    @staticmethod
    def is_short(code: str) -> bool:
        return is_short(code)

    @staticmethod
    def is_full(code: str) -> bool:
        return is_full(code)

    def encode(self, latitude: Any, longitude: Any, code_length: int | None = None) -> str:
        if code_length is None:
            code_length = self.config.code_length
        return encode(latitude, longitude, code_length)

    @staticmethod
    def decode(code: str) -> CodeArea:
        return decode(code)

    def shorten(self, code: str, latitude: Any = None, longitude: Any = None) -> str:
        """Shorten a code relative to the given location, or the configured
        reference location if none is given."""
        latitude, longitude = self._reference(latitude, longitude)
        return shorten(code, latitude, longitude)

    def recover_nearest(self, short_code: str, latitude: Any = None, longitude: Any = None) -> str:
        """Recover a short code relative to the given location, or the
        configured reference location if none is given."""
        latitude, longitude = self._reference(latitude, longitude)
        return recover_nearest(short_code, latitude, longitude)
