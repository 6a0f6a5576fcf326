# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures for TinyParam tests."""

import pytest

from genro_tinyparam import ParamStore

SAMPLE_JSON = """{
    "system": {
        "audio": {
            "volume": "50",
            "mute": "false"
        },
        "display": {
            "brightness": "75"
        }
    }
}"""


@pytest.fixture()
def param_file(tmp_path):
    """A parameter file with the sample system settings."""
    path = tmp_path / "params.json"
    path.write_text(SAMPLE_JSON, encoding="utf-8")
    return path


@pytest.fixture()
def store(param_file):
    """An open store on param_file, closed after the test."""
    s = ParamStore.open(param_file, fsync=False)
    yield s
    s.close()
