"""Tests for metric naming, collision suffixes and the names hash."""

from __future__ import annotations

from nce.metrics.base import MetricRecord, metric_name
from nce.metrics.names import NameCounter, names_hash


def test_path_to_name():
    assert metric_name(["test", "path", "example"]) == "test_path_example"


def test_dots_become_underscores():
    assert metric_name(["ocs", "data", "system.info", "mem.free"]) == (
        "ocs_data_system_info_mem_free"
    )


def test_record_line():
    assert MetricRecord(name="storage_num_users", value="42").to_line() == (
        "storage_num_users 42"
    )


def test_counter_suffixes_repeated_names():
    counter = NameCounter()
    assert counter.register("storage_num_users") == "storage_num_users"
    assert counter.register("storage_num_users") == "storage_num_users2"
    assert counter.register("storage_num_users") == "storage_num_users3"
    assert counter.register("storage_num_files") == "storage_num_files"

    assert counter.names == {"storage_num_users", "storage_num_files"}


def test_suffix_skips_names_already_emitted():
    counter = NameCounter()
    assert counter.register("s_a") == "s_a"
    assert counter.register("s_a") == "s_a2"
    # a real element named like an earlier suffixed name
    assert counter.register("s_a2") == "s_a22"
    assert counter.names == {"s_a", "s_a2"}


def test_first_occurrence_taken_by_earlier_suffix():
    counter = NameCounter()
    assert counter.register("s_a2") == "s_a2"
    assert counter.register("s_a") == "s_a"
    assert counter.register("s_a") == "s_a3"


def test_hash_ignores_order_and_duplicates():
    names = ["b_metric", "a_metric", "c_metric"]
    assert names_hash(names) == names_hash(sorted(names))
    assert names_hash(names) == names_hash(names + ["a_metric"])


def test_hash_of_empty_name_set():
    # md5("") starts with d41d8c
    assert names_hash([]) == 0xD41D8C


def test_hash_changes_with_names():
    assert names_hash(["a_metric"]) != names_hash(["a_metric", "b_metric"])


def test_hash_fits_three_bytes():
    assert 0 <= names_hash(["storage_num_users"]) < 2**24
