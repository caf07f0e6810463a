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

import os

from attrs import field, frozen
from attrs.converters import optional
from environs import Env
from typing import Self

from .coordinates import to_number
from .encode import normalize_code_length


def _to_coordinate(value) -> float:
    return to_number(value, "reference coordinate")


@frozen
class PlusCodeConfig:
    """Defaults used when encoding, shortening and recovering codes."""

    # None falls back to CODE_PRECISION_NORMAL, lengths above the maximum are
    # clamped and illegal lengths are rejected when the config is created
    code_length: int = field(default=None, converter=normalize_code_length)
    """Number of significant digits used when encoding without an explicit
    length."""

    reference_latitude: float | None = field(default=None, converter=optional(_to_coordinate))
    """Latitude of the reference location used to shorten and recover codes."""
    reference_longitude: float | None = field(default=None, converter=optional(_to_coordinate))
    """Longitude of the reference location used to shorten and recover codes."""

    def __attrs_post_init__(self):
        if (self.reference_latitude is None) != (self.reference_longitude is None):
            raise ValueError(
                "reference_latitude and reference_longitude must be provided together"
            )

    @property
    def has_reference(self) -> bool:
        return self.reference_latitude is not None

    def reference(self) -> tuple[float, float]:
        """Return the configured (latitude, longitude) reference location"""
        if not self.has_reference:
            raise ValueError("No reference location is configured")
        return self.reference_latitude, self.reference_longitude

    @classmethod
    def from_env(cls, env_file: str | os.PathLike | None = None) -> Self:
        """Load config from environment variables, or an `.env` file.

        By default the nearest `.env` file is found by searching upwards, if
        env_file is provided only that file is read. Variables already set in
        the environment take precedence over the file."""
        env = Env(expand_vars=True)
        if env_file is None:
            env.read_env()
        else:
            env.read_env(env_file, recurse=False)

        return cls(
            # use defaults
            code_length=env.int("PLUSCODES_CODE_LENGTH", None),
            reference_latitude=env.float("PLUSCODES_REFERENCE_LATITUDE", None),
            reference_longitude=env.float("PLUSCODES_REFERENCE_LONGITUDE", None),
        )
