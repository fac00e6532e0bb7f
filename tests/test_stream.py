import os

import pytest

from crypto.nonce import generate_iv
from crypto.stream import cfb_decrypt, cfb_encrypt, transform
from utils.errors import KeySizeInvalid, RandomnessUnavailable

KEY = bytes(range(32))
IV = bytes(range(16))


def test_nist_sp800_38a_cfb128_aes256_vector():
    # F.3.17 CFB128-AES256.Encrypt
    key = bytes.fromhex(
        "603deb1015ca71be2b73aef0857d7781"
        "1f352c073b6108d72d9810a30914dff4"
    )
    iv = bytes.fromhex("000102030405060708090a0b0c0d0e0f")
    pt = bytes.fromhex(
        "6bc1bee22e409f96e93d7e117393172a"
        "ae2d8a571e03ac9c9eb76fac45af8e51"
    )
    ct = bytes.fromhex(
        "dc7e84bfda79164b7ecd8486985d3860"
        "39ffed143b28b1c832113c6331e5407b"
    )
    assert cfb_encrypt(key, iv, pt) == ct
    assert cfb_decrypt(key, iv, ct) == pt


@pytest.mark.parametrize("size", [0, 1, 15, 16, 17, 1000])
def test_output_length_equals_input(size):
    data = os.urandom(size)
    ct = cfb_encrypt(KEY, IV, data)
    assert len(ct) == size
    assert cfb_decrypt(KEY, IV, ct) == data


def test_decrypt_direction_differs_from_encrypt():
    data = b"x" * 40
    ct = cfb_encrypt(KEY, IV, data)
    # Running the encryptor again does not undo CFB past the first block.
    assert transform(KEY, IV, ct) != data
    assert transform(KEY, IV, ct, decrypt=True) == data


def test_bytearray_key_accepted():
    assert cfb_encrypt(bytearray(KEY), IV, b"abc") == cfb_encrypt(KEY, IV, b"abc")


@pytest.mark.parametrize("bad", [b"", b"k" * 16, b"k" * 24, b"k" * 33])
def test_wrong_key_size(bad):
    with pytest.raises(KeySizeInvalid):
        cfb_encrypt(bad, IV, b"data")


def test_wrong_iv_size():
    with pytest.raises(ValueError):
        cfb_encrypt(KEY, b"short", b"data")


def test_generate_iv_fresh():
    a, b = generate_iv(), generate_iv()
    assert len(a) == len(b) == 16
    assert a != b


def test_generate_iv_entropy_failure(monkeypatch):
    def broken(n):
        raise OSError("no entropy")

    monkeypatch.setattr("crypto.nonce.os.urandom", broken)
    with pytest.raises(RandomnessUnavailable):
        generate_iv()
