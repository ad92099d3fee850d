#
# Copyright(c) 2019 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause-Clear
#

from contextlib import contextmanager
import logging
from threading import Lock
from typing import Callable, Dict

from sized_file import configuration
from sized_file.exceptions import InvalidArgument, MissingPostfixError

LOGGER = logging.getLogger(__name__)

PostfixesGenerator = Callable[[], Dict[str, str]]


def default_postfixes():
    return dict(configuration.default_postfixes)


_lock = Lock()
_generator: PostfixesGenerator = default_postfixes


def set_postfixes_generator(generator: PostfixesGenerator):
    """
    Replace the process-wide source of unit labels used by Size.format().

    The generator is called with no arguments on every format() call that does
    not pass its own postfixes, and must return a map with all of the
    'B', 'KB', 'MB', 'GB' and 'TB' keys.
    Callers replacing it are responsible for restoring the previous generator,
    see postfixes_generator() for a scoped replacement.
    """
    global _generator
    if not callable(generator):
        raise InvalidArgument(f"Postfixes generator has to be callable, got {type(generator)}")
    with _lock:
        _generator = generator
    LOGGER.debug(f"Postfixes generator set to {generator!r}")


def get_postfixes_generator() -> PostfixesGenerator:
    with _lock:
        return _generator


def reset_postfixes_generator():
    set_postfixes_generator(default_postfixes)


@contextmanager
def postfixes_generator(generator: PostfixesGenerator):
    previous = get_postfixes_generator()
    set_postfixes_generator(generator)
    try:
        yield
    finally:
        set_postfixes_generator(previous)


def resolve_postfixes(postfixes: Dict[str, str] = None) -> Dict[str, str]:
    if postfixes is None:
        postfixes = get_postfixes_generator()()

    missing_keys = [key for key in configuration.postfix_keys if key not in postfixes]
    if missing_keys:
        LOGGER.warning(f"Postfixes {postfixes} lack labels for {missing_keys}")
        raise MissingPostfixError(missing_keys)
    return postfixes
