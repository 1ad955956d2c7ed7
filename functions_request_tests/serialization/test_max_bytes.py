import pytest

from functions_request.serialization import Serializer
from functions_request.serialization.adapters import MaxBytesExceededError
from functions_request.serialization.encoding.utf8 import encode_utf8


def test_within_limit() -> None:
    se = Serializer.build_bytes_serializer().with_max_bytes(5)
    se.write_bytes(b'abcd')
    se.write_byte(ord('e'))
    assert se.cur_pos() == 5
    assert se.finalize() == b'abcde'


def test_byte_over_limit() -> None:
    se = Serializer.build_bytes_serializer().with_max_bytes(2)
    se.write_bytes(b'ab')
    with pytest.raises(MaxBytesExceededError):
        se.write_byte(ord('c'))


def test_bytes_over_limit_writes_nothing() -> None:
    inner = Serializer.build_bytes_serializer()
    se = inner.with_max_bytes(3)
    with pytest.raises(MaxBytesExceededError):
        se.write_bytes(b'abcd')
    assert inner.cur_pos() == 0


def test_encoder_over_limit() -> None:
    se = Serializer.build_bytes_serializer().with_max_bytes(4)
    with pytest.raises(MaxBytesExceededError):
        encode_utf8(se, 'four')


def test_optional_max_bytes() -> None:
    inner = Serializer.build_bytes_serializer()
    assert inner.with_optional_max_bytes(None) is inner
    se = inner.with_optional_max_bytes(1)
    assert se is not inner
    with pytest.raises(MaxBytesExceededError):
        se.write_bytes(b'ab')
