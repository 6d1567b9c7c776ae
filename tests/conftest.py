"""Shared test fixtures."""

from __future__ import annotations

import pytest

from nce.config.settings import APIConfig, NextcloudConfig, Settings

STORAGE_XML = """<storage>
    <num_users>42</num_users>
    <num_files>149545</num_files>
    <num_storages>66</num_storages>
    <num_storages_local>1</num_storages_local>
    <num_storages_home>65</num_storages_home>
    <num_storages_other>0</num_storages_other>
</storage>"""


@pytest.fixture
def storage_xml() -> str:
    return STORAGE_XML


@pytest.fixture
def replace_values() -> dict[str, int]:
    return {"ok": 1, "yes": 1, "OK": 1, "none": 0, "no": 0}


@pytest.fixture
def sample_settings() -> Settings:
    return Settings(
        nextcloud=NextcloudConfig(
            url="https://cloud.example.org/ocs/v2.php/apps/serverinfo/api/v1/info",
            user="admin",
            password="secret",
        ),
        api=APIConfig(host="127.0.0.1", port=9205),
    )
