import dataclasses

import pytest

from data_models import ChecksumRequest, ChecksumResult, DIGEST_HEX_LENGTHS


def _result():
    return ChecksumResult(
        md5="a" * 32, sha1="b" * 40, sha256="c" * 64, sha512="d" * 128,
        file_size=12, modified="1700000000", created="1690000000",
    )


def test_to_dict_has_all_fields():
    out = _result().to_dict()
    assert out == {
        "md5": "a" * 32,
        "sha1": "b" * 40,
        "sha256": "c" * 64,
        "sha512": "d" * 128,
        "file_size": 12,
        "modified": "1700000000",
        "created": "1690000000",
        "created_source": "birthtime",
    }


def test_digests_in_display_order():
    names = [name for name, _ in _result().digests()]
    assert names == list(DIGEST_HEX_LENGTHS) == ["md5", "sha1", "sha256", "sha512"]


def test_result_and_request_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        _result().md5 = "0" * 32
    with pytest.raises(dataclasses.FrozenInstanceError):
        ChecksumRequest("a.txt").path = "b.txt"


def test_result_requires_metadata():
    with pytest.raises(TypeError):
        ChecksumResult(md5="a" * 32, sha1="b" * 40, sha256="c" * 64, sha512="d" * 128)
