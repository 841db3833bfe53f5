import os
import subprocess
from unittest import mock

import pytest

from litemime import util
from litemime.util import MimeInfo


def _completed(args, stdout):
    return subprocess.CompletedProcess(args, 0, stdout=stdout, stderr="")


def test_from_combined_splits_type_and_encoding():
    combined = "text/plain; charset=us-ascii"
    info = MimeInfo.from_combined(combined)
    assert info.mime_type == "text/plain"
    assert info.mime_encoding == "us-ascii"
    assert info.combined == combined


def test_from_combined_without_semicolon_rejected():
    with pytest.raises(ValueError):
        MimeInfo.from_combined("data")


def test_from_combined_without_equals_rejected():
    with pytest.raises(ValueError):
        MimeInfo.from_combined("text/plain; broken")


def test_get_mimetype_returns_first_line():
    output = "text/plain; charset=utf-8"
    with mock.patch("subprocess.run", return_value=_completed([], output + "\nmore\n")) as run:
        assert util.get_mimetype("some.txt") == output
    assert run.call_args.args[0][-1] == "some.txt"


def test_get_mimetype_without_tool_returns_none():
    with mock.patch("subprocess.run", side_effect=FileNotFoundError):
        assert util.get_mimetype("some.txt") is None


def test_get_mimetype_empty_output_returns_none():
    with mock.patch("subprocess.run", return_value=_completed([], "")):
        assert util.get_mimetype("some.txt") is None


def test_info_from_string_writes_and_removes_temp_file():
    seen = {}

    def fake_run(args, **kwargs):
        path = args[-1]
        with open(path, "rb") as stream:
            seen["content"] = stream.read()
        seen["path"] = path
        return _completed(args, "text/plain; charset=utf-8\n")

    content = "hello äöü"
    with mock.patch("subprocess.run", side_effect=fake_run):
        info = util.info_from_string(content)
    assert seen["content"] == content.encode("utf-8")
    assert not os.path.exists(seen["path"])
    assert info == MimeInfo("text/plain", "utf-8", "text/plain; charset=utf-8")


def test_info_from_string_without_encoding():
    with mock.patch("subprocess.run", return_value=_completed([], "data\n")):
        info = util.info_from_string("x")
    assert info == MimeInfo(combined="data")


def test_info_from_string_empty_returns_none():
    with mock.patch("subprocess.run") as run:
        assert util.info_from_string("") is None
    assert run.call_count == 0


def test_info_from_file(tmp_path):
    target = tmp_path / "sample.txt"
    target.write_text("abc")
    combined = "text/plain; charset=us-ascii"
    with mock.patch("subprocess.run", return_value=_completed([], combined + "\n")) as run:
        info = util.info_from_file(target)
    assert run.call_args.args[0][-1] == str(target)
    assert info.mime_type == "text/plain"
    assert info.mime_encoding == "us-ascii"


def test_info_from_file_failure_returns_none():
    with mock.patch("subprocess.run", side_effect=OSError):
        assert util.info_from_file("missing") is None


def test_random_int_in_range():
    values = [util.random_int() for _ in range(200)]
    assert all(0 <= value <= util.RAND_MAX for value in values)
    assert len(set(values)) > 1