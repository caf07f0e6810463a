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
from .codec import OpenLocationCode
from .config import PlusCodeConfig
from .constants import CODE_PRECISION_EXTRA, CODE_PRECISION_NORMAL
from .coordinates import clip_latitude, location_to_integers, normalize_longitude
from .decode import decode
from .encode import encode, encode_integers
from .logger import configure_logging
from .shorten import recover_nearest, shorten
from .validity import InvalidCodeError, get_alphabet, is_full, is_short, is_valid
