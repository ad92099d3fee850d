#
# Copyright(c) 2019 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause-Clear
#

import logging
from threading import Thread

import pytest

from sized_file import (InvalidArgument, MissingPostfixError, Size, default_postfixes,
                        get_postfixes_generator, postfixes_generator, reset_postfixes_generator,
                        resolve_postfixes, set_postfixes_generator)

full_names = {
    "B": "Bytes",
    "KB": "Kilobytes",
    "MB": "Megabytes",
    "GB": "Gigabytes",
    "TB": "Terabytes",
}
lower_case = {"B": "b", "KB": "kb", "MB": "mb", "GB": "gb", "TB": "tb"}


def test_default_postfixes():
    assert default_postfixes() == {"B": "B", "KB": "KB", "MB": "MB", "GB": "GB", "TB": "TB"}
    assert get_postfixes_generator() is default_postfixes


def test_default_postfixes_returns_copy():
    default_postfixes()["KB"] = "changed"
    assert Size.from_kilobytes(1).format() == "1.00 KB"


def test_set_postfixes_generator():
    set_postfixes_generator(lambda: full_names)
    assert Size.from_kilobytes(1).format() == "1.00 Kilobytes"


def test_set_postfixes_generator_affects_all_instances():
    Size.set_postfixes_generator(lambda: lower_case)
    assert Size(100).format() == "100 b"
    assert Size.from_megabytes(1).format() == "1.00 mb"
    assert str(Size.from_terabytes(2)) == "2.00 tb"


def test_explicit_postfixes_override_generator():
    set_postfixes_generator(lambda: lower_case)
    assert Size.from_kilobytes(1).format(postfixes=full_names) == "1.00 Kilobytes"


def test_generator_called_on_every_format():
    calls = []

    def generator():
        calls.append(1)
        return full_names

    set_postfixes_generator(generator)
    Size(1).format()
    str(Size(2))
    Size(3).format(postfixes=lower_case)
    assert len(calls) == 2


def test_reset_postfixes_generator():
    set_postfixes_generator(lambda: lower_case)
    reset_postfixes_generator()
    assert Size.from_megabytes(1).format() == "1.00 MB"


def test_postfixes_generator_context_restores_previous():
    set_postfixes_generator(lambda: lower_case)
    with postfixes_generator(lambda: full_names):
        assert Size.from_gigabytes(1).format() == "1.00 Gigabytes"
    assert Size.from_gigabytes(1).format() == "1.00 gb"


def test_postfixes_generator_context_restores_on_error():
    with pytest.raises(RuntimeError):
        with postfixes_generator(lambda: full_names):
            raise RuntimeError("format failed")
    assert get_postfixes_generator() is default_postfixes


def test_generator_has_to_be_callable():
    with pytest.raises(InvalidArgument):
        set_postfixes_generator(full_names)
    assert get_postfixes_generator() is default_postfixes


def test_generator_missing_keys(caplog):
    set_postfixes_generator(lambda: {"B": "b"})
    with caplog.at_level(logging.WARNING, logger="sized_file.postfixes"):
        with pytest.raises(MissingPostfixError) as error:
            Size(10).format()
    assert error.value.details["missing_keys"] == ["KB", "MB", "GB", "TB"]
    assert "lack labels" in caplog.text


def test_resolve_postfixes():
    assert resolve_postfixes() == default_postfixes()
    assert resolve_postfixes(full_names) is full_names
    set_postfixes_generator(lambda: lower_case)
    assert resolve_postfixes() == lower_case


def test_concurrent_format_sees_whole_generator():
    results = []
    expected = {"1.00 KB", "1.00 kb", "1.00 Kilobytes"}

    def format_many():
        for _ in range(200):
            results.append(Size.from_kilobytes(1).format())

    def swap_many():
        for i in range(200):
            set_postfixes_generator(lambda: lower_case if i % 2 else full_names)

    threads = [Thread(target=format_many) for _ in range(4)] + [Thread(target=swap_many)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 800
    assert set(results) <= expected
