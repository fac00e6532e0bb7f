import hashlib

from crypto.hash import derive_key, file_checksum, sha256_bytes


def test_sha256_matches_hashlib():
    assert sha256_bytes(b"abc") == hashlib.sha256(b"abc").digest()


def test_derive_key_is_deterministic_and_32_bytes():
    k1 = derive_key("correct horse")
    k2 = derive_key(b"correct horse")
    assert isinstance(k1, bytearray)
    assert len(k1) == 32
    assert k1 == k2
    assert bytes(k1) == hashlib.sha256(b"correct horse").digest()


def test_derive_key_differs_per_password():
    assert derive_key("a") != derive_key("b")


def test_derive_key_empty_password():
    assert bytes(derive_key("")) == hashlib.sha256(b"").digest()


def test_file_checksum(tmp_path):
    p = tmp_path / "f.bin"
    data = bytes(range(256)) * 1000
    p.write_bytes(data)
    assert file_checksum(p) == hashlib.sha256(data).hexdigest()
