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
import logging
import os
import pathlib


def parse_log_level(level_name: str | None) -> int:
    """
    Resolve a level name like "DEBUG" into a builtin logging level, falling
    back to INFO (with a warning) if the name isn't recognised.
    """
    if level_name is None:
        return logging.INFO

    log_levels = logging.getLevelNamesMapping()
    if level_name in log_levels.keys():
        return log_levels[level_name]

    valid_levels = ', '.join(log_levels.keys())
    logging.warning(
        f"LOG_LEVEL={level_name} is not a valid log level, must be one of: {valid_levels}"
    )
    return logging.INFO


def rotate_log_file(log_file: str) -> pathlib.Path | None:
    """
    If a file already exists at log_file, move it aside by prefixing the
    filename with `000`, `001`, etc. Returns the new name of the moved file.
    """
    if not os.path.isfile(log_file):
        return None

    file_dir = os.path.dirname(log_file)
    file_name = os.path.basename(log_file)
    rotation = 0
    rotate_log_name = pathlib.Path(file_dir, f"{rotation:03d}.{file_name}")
    while os.path.exists(rotate_log_name):
        rotation += 1
        rotate_log_name = pathlib.Path(file_dir, f"{rotation:03d}.{file_name}")
    os.rename(log_file, rotate_log_name)
    return rotate_log_name


PACKAGE_LOGGER = "pluscodes"


def configure_logging() -> tuple[int, str | None]:
    """
    Set up logging from environment variables. Nothing is configured when
    the package is imported; applications call this once at start up.

    LOG_LEVEL - must be a valid logging level from the builtin logging package.
      Sets the level of the root logger and the pluscodes logger.

    LOG_FILE - a filename where the pluscodes logger should also write. If the
      provided filename already exists, it will be rotated out of the way.

    :return: (log_level, log_file)
    """
    log_level = parse_log_level(os.getenv("LOG_LEVEL", None))
    logging.basicConfig(level=log_level)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)

    log_file = os.getenv("LOG_FILE", None)
    if log_file is not None:
        rotate_log_file(log_file)
        # log output goes to the terminal and the file
        package_logger.addHandler(logging.FileHandler(log_file))

    return log_level, log_file


def get_logger(package_name: str) -> logging.Logger:
    """Logger for a module of the package. Handlers and levels are left to
    configure_logging, or to the application."""
    return logging.getLogger(package_name)
