from unittest import mock

import pytest
from zope.interface import implementer

from keyphrase import codec, keygen
from keyphrase._interfaces import IRandomSource
from keyphrase.errors import NoSecureRandomError


@implementer(IRandomSource)
class FixedSource:
    secure = True

    def __init__(self, *values):
        self._values = list(values)

    def random(self):
        return self._values.pop(0)


def test_system_source_range():
    source = keygen.SystemRandomSource()
    with mock.patch("os.urandom", return_value=b"\x00" * 7):
        assert source.random() == 0.0
    with mock.patch("os.urandom", return_value=b"\xff" * 7):
        r = source.random()
    assert 0.999 < r < 1.0


def test_random_key_from_os():
    with mock.patch("os.urandom", return_value=b"\x00" * 7):
        key = keygen.random_key(4)
    assert key == b"\x00\x00\x00\x00"
    with mock.patch("os.urandom", return_value=b"\xff" * 7):
        key = keygen.random_key(2, secure_required=True)
    assert key == b"\xff\xff"


def test_random_key_default_length():
    key = keygen.random_key()
    assert isinstance(key, bytes)
    assert len(key) == 32


def test_random_key_scaling():
    key = keygen.random_key(4, FixedSource(0.0, 0.5, 0.999, 0.00390625))
    assert key == b"\x00\x80\xff\x01"


def test_insecure_source():
    a = keygen.random_key(16, keygen.InsecureRandomSource(seed=1))
    b = keygen.random_key(16, keygen.InsecureRandomSource(seed=1))
    assert a == b
    with pytest.raises(NoSecureRandomError):
        keygen.random_key(16, keygen.InsecureRandomSource(),
                          secure_required=True)


def test_not_a_source():
    with pytest.raises(TypeError):
        keygen.random_key(1, source=lambda: 0.5)


def test_no_os_randomness(log_messages):
    with mock.patch("os.urandom", side_effect=NotImplementedError()):
        source = keygen.default_random_source()
        assert isinstance(source, keygen.InsecureRandomSource)
        assert log_messages.matching("insecure generator")
        with pytest.raises(NoSecureRandomError):
            keygen.default_random_source(secure_required=True)
        with pytest.raises(NoSecureRandomError):
            keygen.random_key(4, secure_required=True)


def test_random_passphrase():
    with mock.patch("os.urandom", return_value=b"\x00" * 7):
        assert keygen.random_passphrase(2) == "a a"
    passphrase = keygen.random_passphrase(16)
    assert len(passphrase.split(" ")) == 10
    assert len(codec.decode(passphrase, 16)) == 16
