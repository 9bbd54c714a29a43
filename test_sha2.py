import pytest

from compress import compress_block, update_hash_state
from errors import InvalidVariant
from sha2 import (
    compute_digest,
    compute_digest_bytes,
    compute_text_digest,
    format_digest,
    sha2_after,
    sha2_before,
    sha2_with_tracking,
    sha224,
    sha256,
    sha384,
    sha512,
)
from variants import SHA224, SHA256, SHA384, SHA512


TEST_VECTORS = [
    (b"", 224, "d14a028c2a3a2bc9476102bb288234c415a2b01f828ea62ac5b3e42f"),
    (b"", 256, "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"),
    (
        b"",
        384,
        "38b060a751ac96384cd9327eb1b1e36a21fdb71114be07434c0cc7bf63f6e1da274edebfe76f65fbd51ad2f14898b95b",
    ),
    (
        b"",
        512,
        "cf83e1357eefb8bdf1542850d66d8007d620e4050b5715dc83f4a921d36ce9ce"
        "47d0d13c5d85f2b0ff8318d2877eec2f63b931bd47417a81a538327af927da3e",
    ),
    (b"abc", 224, "23097d223405d8228642a477bda255b32aadbce4bda0b3f7e36c9da7"),
    (b"abc", 256, "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"),
    (
        b"abc",
        384,
        "cb00753f45a35e8bb5a03d699ac65007272c32ab0eded1631a8b605a43ff5bed8086072ba1e7cc2358baeca134c825a7",
    ),
    (
        b"abc",
        512,
        "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
        "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f",
    ),
    (b"Hello, World!", 224, "72a23dfa411ba6fde01dbfabf3b00a709c93ebf273dc29e2d8b261ff"),
    (b"Hello, World!", 256, "dffd6021bb2bd5b0af676290809ec3a53191dd81c7f70a4b28688a362182986f"),
    (
        b"Hello, World!",
        384,
        "5485cc9b3365b4305dfb4e8337e0a598a574f8242bf17289e0dd6c20a3cd44a089de16ab4ab308f63e44b1170eb5f515",
    ),
    (
        b"Hello, World!",
        512,
        "374d794a95cdcfd8b35993185fef9ba368f160d8daf432d08ba9f1ed1e5abe6c"
        "c69291e0fa2fe0006a52570ef18c19def4e617c33ce52ef0a6e5fbe318cb0387",
    ),
    (b"Sample text", 224, "0e902eb71746744b347aaa8292451b1d767d0f3054e3f09102474cc4"),
    (b"Sample text", 256, "3a2c5c49db9a35faeca3e211610a07ba996b6a8ef74aee251392c95a5557d95b"),
    (
        b"Sample text",
        384,
        "fb013f4796e2ff84526c9a7d8e70634058115c9e9e3b9e176084981a2266ecf19d05e3a7d1181ca2efea7451fa54ea9a",
    ),
    (
        b"Sample text",
        512,
        "65cdeb7a86b0c38ee236606692a3abe4ea68d43e0cf600cb27e74d23830f5505"
        "b0234b8c6b44d38b7e5841b3c69821cd5a0b014b738e150a671f73b8aefc26db",
    ),
]

# 448-bit message from FIPS 180-4; pads to two blocks for SHA-224/256.
TWO_BLOCK = b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq"


@pytest.mark.parametrize("message,bits,expected", TEST_VECTORS)
def test_known_digests(message, bits, expected):
    assert compute_digest(message, bits) == expected


@pytest.mark.parametrize(
    "bits,expected",
    [
        (224, "75388b16512776cc5dba5da1fd890150b0c6455cb4f58b1952522525"),
        (256, "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"),
        (
            384,
            "3391fdddfc8dc7393707a65b1b4709397cf8b1d162af05abfe8f450de5f36bc6b0455a8520bc4e6f5fe95b1fe3c8452b",
        ),
        (
            512,
            "204a8fc6dda82f0a0ced7beb8e08a41657c16ef468b228a8279be331a703c335"
            "96fd15c13b1b07f9aa1d3bea57789ca031ad85c7a71dd70354ec631238ca3445",
        ),
    ],
)
def test_two_block_message(bits, expected):
    assert compute_digest(TWO_BLOCK, bits) == expected


@pytest.mark.parametrize(
    "length,bits,expected",
    [
        (55, 256, "9f4390f8d30c2dd92ec9f095b65e2b9ae9b0a925a5258e241c9f1e910f734318"),
        (56, 256, "b35439a4ac6f0948b6d6f9e3c6af0f5f590ce20f1bde7090ef7970686ec6738a"),
        (64, 256, "ffe054fe7ae0cb6dc65c3af9b61d5209f439851db43d0ba5997337df154668eb"),
        (
            111,
            512,
            "fa9121c7b32b9e01733d034cfc78cbf67f926c7ed83e82200ef86818196921760b4beff48404df811b953828274461673c68d04e297b0eb7b2b4d60fc6b566a2",
        ),
        (
            112,
            512,
            "c01d080efd492776a1c43bd23dd99d0a2e626d481e16782e75d54c2503b5dc32bd05f0f1ba33e568b88fd2d970929b719ecbb152f58f130a407c8830604b70ca",
        ),
    ],
)
def test_padding_boundaries(length, bits, expected):
    assert compute_digest(b"a" * length, bits) == expected


@pytest.mark.parametrize("spec", [SHA224, SHA256, SHA384, SHA512], ids=lambda s: s.name)
def test_output_length(spec):
    for message in (b"", b"x", b"y" * 300):
        digest = compute_digest(message, spec)
        assert len(digest) == spec.digest_hex_length == 2 * spec.output_words * spec.byte_width
        assert digest == digest.lower()
        int(digest, 16)


def test_deterministic():
    for bits in (224, 256, 384, 512):
        assert compute_digest(b"test message", bits) == compute_digest(b"test message", bits)


def test_appending_a_byte_changes_digest():
    for bits in (224, 256, 384, 512):
        base = compute_digest(b"Sample text", bits)
        assert compute_digest(b"Sample text.", bits) != base
        assert compute_digest(b"Sample text\x00", bits) != base


def test_224_diverges_from_truncated_256():
    """SHA-224 is not SHA-256 cut short: the initial hash values differ."""
    assert compute_digest(b"abc", 224) != compute_digest(b"abc", 256)[:56]
    assert compute_digest(b"abc", 384) != compute_digest(b"abc", 512)[:96]


def test_shorthands():
    assert sha224(b"abc") == compute_digest(b"abc", 224)
    assert sha256(b"abc") == compute_digest(b"abc", 256)
    assert sha384(b"abc") == compute_digest(b"abc", 384)
    assert sha512(b"abc") == compute_digest(b"abc", 512)


def test_accepts_bytearray_and_memoryview():
    expected = compute_digest(b"abc", 256)
    assert compute_digest(bytearray(b"abc"), 256) == expected
    assert compute_digest(memoryview(b"abc"), 256) == expected


def test_digest_bytes_matches_hex():
    for bits in (224, 256, 384, 512):
        raw = compute_digest_bytes(b"Hello, World!", bits)
        assert len(raw) == bits // 8
        assert raw.hex() == compute_digest(b"Hello, World!", bits)


def test_text_digest_encoding():
    assert compute_text_digest("Hello, World!", 256) == compute_digest(b"Hello, World!", 256)
    assert compute_text_digest("é", 256, encoding="latin-1") == compute_digest(b"\xe9", 256)
    assert compute_text_digest("é", 256) == compute_digest(b"\xc3\xa9", 256)


def test_invalid_variant():
    with pytest.raises(InvalidVariant):
        compute_digest(b"abc", 128)


def test_before_and_after_reproduce_digest():
    state, schedules = sha2_before(TWO_BLOCK, SHA256)
    assert state == SHA256.initial_hash
    assert len(schedules) == 2
    for ws in schedules:
        state = update_hash_state(state, compress_block(state, ws, SHA256), SHA256)
    assert sha2_after(state, SHA256) == compute_digest(TWO_BLOCK, 256)


def test_block_order_matters():
    """Chaining the same blocks in reverse order gives a different state."""
    state, schedules = sha2_before(TWO_BLOCK, SHA256)
    forward = reverse = state
    for ws in schedules:
        forward = update_hash_state(forward, compress_block(forward, ws, SHA256), SHA256)
    for ws in reversed(schedules):
        reverse = update_hash_state(reverse, compress_block(reverse, ws, SHA256), SHA256)
    assert forward != reverse


def test_format_digest_truncates_to_output_words():
    state = tuple(range(1, 9))
    assert format_digest(state, SHA224) == "".join(f"{i:08x}" for i in range(1, 8))
    assert format_digest(state, SHA384) == "".join(f"{i:016x}" for i in range(1, 7))
    assert format_digest(state, SHA512) == "".join(f"{i:016x}" for i in range(1, 9))


def test_tracking_matches_plain_digest():
    digest, states = sha2_with_tracking(TWO_BLOCK, 512)
    assert digest == compute_digest(TWO_BLOCK, 512)
    assert len(states) == 1
    assert len(states[0]) == 80

    digest, states = sha2_with_tracking(TWO_BLOCK, 256)
    assert digest == compute_digest(TWO_BLOCK, 256)
    assert [len(s) for s in states] == [64, 64]


@pytest.mark.parametrize("message", [5, 0, "abc", None, 3.5, [97, 98, 99]])
def test_rejects_non_bytes_input(message):
    """Only bytes-like objects are hashed; ints are not turned into zero bytes."""
    with pytest.raises(TypeError):
        compute_digest(message, 256)
    with pytest.raises(TypeError):
        compute_digest_bytes(message, 512)
    with pytest.raises(TypeError):
        sha2_with_tracking(message, 224)
