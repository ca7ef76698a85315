"""
clack_cipher — Alphabet, Cipher and Keystream Test Suite
========================================================
Run with:  python -m pytest tests/ -v
       or:  python tests/test_all_ciphers.py
"""

import sys
import os
import copy
import time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from clack_cipher.alphabet               import clean, group, mod, shift, shift_char
from clack_cipher.ciphers                import CipherKind, build_cipher
from clack_cipher.ciphers.null           import NullCipher
from clack_cipher.ciphers.caesar         import CaesarCipher
from clack_cipher.ciphers.vignere        import VignereCipher
from clack_cipher.ciphers.playfair       import PlayfairCipher
from clack_cipher.ciphers.one_time_pad   import PseudoOneTimePad
from clack_cipher.keystream              import KeystreamGenerator, derive_seed, _reverse64
from clack_cipher.errors                 import (
    ConstructionError, InvalidInputError, UnknownCipherNameError,
)

MELVILLE = """
    Call me Ishmael. Some years ago -- never mind how long
    precisely -- having little or no money in my purse, and
    nothing particular to interest me on shore, I thought I
    would sail about a little and see the watery part of
    the world.
    """

TEXTS = [
    "",
    "X",
    "Hello, World!",
    "balloon",
    "jazz",
    "aaaa",
    "XXXXX",
    "ZZ",
    "Meet me at the usual place at ten rather than eight o'clock",
    MELVILLE,
]

KEYS = {
    CipherKind.NULL_CIPHER:         ["KEY", "", "anything at all"],
    CipherKind.CAESAR_CIPHER:       ["B", "ABCDEF", "XYZ", "Z"],
    CipherKind.VIGNERE_CIPHER:      ["A", "LEMON", "ZYXWVUTSR"],
    CipherKind.PLAYFAIR_CIPHER:     ["", " ", "PLAYFAIR EXAMPLE", "# James T. Kirk"],
    CipherKind.PSEUDO_ONE_TIME_PAD: ["", "a", " qwertyuio pasdfgh jklzx cvbnm", MELVILLE],
}

# ── Alphabet ──────────────────────────────────────────────────────────────────
def test_clean():
    assert clean(None) is None
    assert clean("") == ""
    assert clean("a1! B") == "AB"
    assert clean("  hello, World  ") == "HELLOWORLD"

def test_mod():
    assert mod(-1, 26) == 25
    assert mod(5, 26) == 5
    assert mod(-27, 26) == 25
    assert mod(52, 26) == 0

@pytest.mark.parametrize("modulus", [0, -1])
def test_mod_rejects_small_modulus(modulus):
    with pytest.raises(InvalidInputError):
        mod(3, modulus)

def test_shift():
    assert shift_char("A", 1) == "B"
    assert shift_char("Z", 1) == "A"
    assert shift_char("A", -1) == "Z"
    assert shift_char("M", 0) == "M"
    assert shift("ABC", 27) == "BCD"
    assert shift("", 5) == ""
    assert shift(None, 5) is None

@pytest.mark.parametrize("bad", ["a", " ", "1", "É"])
def test_shift_char_rejects_non_alphabet(bad):
    with pytest.raises(InvalidInputError):
        shift_char(bad, 1)

def test_shift_text_rejects_non_alphabet():
    with pytest.raises(InvalidInputError):
        shift("AB C", 1)

def test_group():
    assert group("ABCDE", 2) == "AB CD E"
    assert group("ABCD", 2) == "AB CD"
    assert group("ABCDEFGHIJ", 5) == "ABCDE FGHIJ"
    assert group("AB CD E", 2) == "AB CD E"
    assert group("", 3) == ""
    assert group(None, 3) is None

def test_group_rejects_small_size():
    with pytest.raises(InvalidInputError):
        group("ABC", 0)

# ── Null ──────────────────────────────────────────────────────────────────────
def test_null_identity():
    n = NullCipher("ignored")
    for text in ["", "Hello, World!", "  spaced  ", None]:
        assert n.prepare(text) == text
        assert n.encrypt(text) == text
        assert n.decrypt(text) == text

# ── Caesar ────────────────────────────────────────────────────────────────────
def test_caesar_string_key():
    c = CaesarCipher("B")
    assert c.offset == 1
    assert c.encrypt("A") == "B"
    assert c.encrypt(c.prepare("Hello")) == "IFMMP"
    assert c.decrypt("IFMMP") == "HELLO"

def test_caesar_int_key():
    assert CaesarCipher(3).encrypt("HELLO") == "KHOOR"
    assert CaesarCipher(29).offset == 3
    assert CaesarCipher(-1).offset == 25

def test_caesar_zero_is_clean():
    c = CaesarCipher(0)
    assert c.encrypt(c.prepare("a1! B")) == clean("a1! B")
    assert CaesarCipher("A").encrypt("HELLO") == "HELLO"

@pytest.mark.parametrize("key", [None, "", " ", "a", "aB", "#A"])
def test_caesar_bad_keys(key):
    with pytest.raises(ConstructionError):
        CaesarCipher(key)

# ── Vignere ───────────────────────────────────────────────────────────────────
def test_vignere_known_vector():
    v = VignereCipher("LEMON")
    assert v.encrypt(v.prepare("attack at dawn")) == "LXFOPVEFRNHR"
    assert v.decrypt("LXFOPVEFRNHR") == "ATTACKATDAWN"

def test_vignere_good_key():
    assert VignereCipher("ABCD").key == "ABCD"

@pytest.mark.parametrize("key", [None, "", " ", " ABCD", "ABCd", "aBCD"])
def test_vignere_bad_keys(key):
    with pytest.raises(ConstructionError):
        VignereCipher(key)

# ── Playfair ──────────────────────────────────────────────────────────────────
def test_playfair_empty_key_matrix():
    p = PlayfairCipher("")
    assert p.matrix == (
        tuple("ABCDE"),
        tuple("FGHIK"),
        tuple("LMNOP"),
        tuple("QRSTU"),
        tuple("VWXYZ"),
    )

def test_playfair_keyed_matrix():
    p = PlayfairCipher("playfair example")
    assert "".join("".join(row) for row in p.matrix) == "PLAYFIREXMBCDGHKNOQSTUVWZ"

def test_playfair_null_key():
    with pytest.raises(ConstructionError):
        PlayfairCipher(None)

def test_playfair_prepare():
    p = PlayfairCipher("")
    assert p.prepare("BALLOON") == "BALXLOON"
    assert p.prepare("jam") == "IAMZ"
    assert p.prepare("Hide the gold in the tree stump") == "HIDETHEGOLDINTHETREXESTUMP"
    assert p.prepare("") == ""
    assert p.prepare(None) is None

def test_playfair_prepare_filler_collisions():
    p = PlayfairCipher("")
    assert p.prepare("XX") == "XQXZ"
    assert p.prepare("Z") == "ZX"
    assert p.prepare("ZZ") == "ZXZX"

def test_playfair_known_vector():
    p  = PlayfairCipher("PLAYFAIR EXAMPLE")
    ct = p.encrypt(p.prepare("Hide the gold in the tree stump"))
    assert ct == "BMODZBXDNABEKUDMUIXMMOUVIF"
    assert p.decrypt(ct) == "HIDETHEGOLDINTHETREXESTUMP"

def test_playfair_row_column_rectangle():
    p = PlayfairCipher("")
    assert p.encrypt("AB") == "BC"     # same row
    assert p.encrypt("DE") == "EA"     # same row, wraps
    assert p.encrypt("AF") == "FL"     # same column
    assert p.encrypt("VA") == "AF"     # same column, wraps
    assert p.encrypt("AG") == "BF"     # rectangle
    assert p.decrypt("BF") == "AG"

@pytest.mark.parametrize("text", ["AA", "ABC", "AJ", "Ab"])
def test_playfair_rejects_unprepared(text):
    p = PlayfairCipher("")
    with pytest.raises(InvalidInputError):
        p.encrypt(text)
    with pytest.raises(InvalidInputError):
        p.decrypt(text)

# ── Pseudo one-time pad ───────────────────────────────────────────────────────
@pytest.fixture(scope="module")
def pads():
    """Two pairs of pads, each pair built more than a second apart."""
    seed = 1315268640013699
    otp0 = PseudoOneTimePad(seed)
    time.sleep(1)
    otp1 = PseudoOneTimePad(seed)
    str0 = PseudoOneTimePad(MELVILLE)
    time.sleep(1)
    str1 = PseudoOneTimePad(MELVILLE)
    return otp0, otp1, str0, str1

def test_otp_prepare(pads):
    otp0, otp1, str0, str1 = pads
    preps = {p.prepare(MELVILLE) for p in pads}
    assert len(preps) == 1
    prep = preps.pop()
    assert otp0.prepare(prep) == prep
    assert str1.prepare(prep) == prep

def test_otp_encrypt_decrypt(pads):
    otp0, otp1, str0, str1 = pads
    for tv in ["", "X", otp0.prepare(MELVILLE)]:
        assert otp1.decrypt(otp0.encrypt(tv)) == tv
        assert otp0.decrypt(otp1.encrypt(tv)) == tv
        assert str1.decrypt(str0.encrypt(tv)) == tv
        assert str0.decrypt(str1.encrypt(tv)) == tv

def test_otp_changes_text():
    p = PseudoOneTimePad("shared secret")
    assert p.encrypt("A" * 60) != "A" * 60

def test_otp_null_key():
    with pytest.raises(ConstructionError):
        PseudoOneTimePad(None)

@pytest.mark.parametrize("key", ["\udcff", "abc\udcff", "x" * 32 + "tail \udc80"])
def test_otp_unencodable_key(key):
    with pytest.raises(ConstructionError):
        PseudoOneTimePad(key)

def test_otp_negative_seed():
    a = PseudoOneTimePad(-1)
    b = PseudoOneTimePad((1 << 64) - 1)
    assert b.decrypt(a.encrypt("NEGATIVESEED")) == "NEGATIVESEED"

def test_otp_rejected_input_consumes_nothing():
    a = PseudoOneTimePad("in step")
    b = PseudoOneTimePad("in step")
    with pytest.raises(InvalidInputError):
        a.encrypt("AB1")
    assert b.decrypt(a.encrypt("HELLO")) == "HELLO"

def test_otp_out_of_step():
    a = PseudoOneTimePad("in step")
    b = PseudoOneTimePad("in step")
    a.encrypt("SKIPPED")
    msg = "Q" * 40
    assert b.decrypt(a.encrypt(msg)) != msg

# ── Keystream ─────────────────────────────────────────────────────────────────
def test_keystream_replays_from_seed():
    g0 = KeystreamGenerator(42)
    g1 = KeystreamGenerator(42)
    draws = [g0.next_shift() for _ in range(500)]
    assert draws == [g1.next_shift() for _ in range(500)]
    assert all(0 <= d < 26 for d in draws)
    assert len(set(draws)) == 26

def test_keystream_seeds_differ():
    g0 = KeystreamGenerator(1)
    g1 = KeystreamGenerator(2)
    assert [g0.next_shift() for _ in range(50)] != [g1.next_shift() for _ in range(50)]

def test_keystream_refuses_copy():
    g = KeystreamGenerator(7)
    with pytest.raises(TypeError):
        copy.copy(g)
    with pytest.raises(TypeError):
        copy.deepcopy(g)

def test_derive_seed():
    assert derive_seed("") == 0
    assert derive_seed("short phrase") == derive_seed("short phrase")
    assert derive_seed("short phrase") < 2 ** 32
    long_key = "x" * 32 + "and then some more"
    assert derive_seed(long_key) >> 32 != 0
    assert derive_seed(long_key) & 0xFFFFFFFF != 0
    assert 0 <= derive_seed(MELVILLE) < 2 ** 64

def test_reverse64():
    assert _reverse64(1) == 1 << 63
    assert _reverse64(1 << 63) == 1
    assert _reverse64(0xFFFFFFFF) == 0xFFFFFFFF << 32

# ── Round trips across every cipher ───────────────────────────────────────────
@pytest.mark.parametrize("kind,key", [(k, key) for k, keys in KEYS.items() for key in keys])
@pytest.mark.parametrize("text", TEXTS)
def test_roundtrip(kind, key, text):
    sender   = build_cipher(kind, key)
    receiver = build_cipher(kind, key)
    prep = sender.prepare(text)
    assert receiver.prepare(text) == prep
    assert receiver.decrypt(sender.encrypt(prep)) == prep

def test_build_cipher_by_name():
    assert isinstance(build_cipher("caesar_cipher", "B"), CaesarCipher)
    assert isinstance(build_cipher(CipherKind.PLAYFAIR_CIPHER, ""), PlayfairCipher)
    with pytest.raises(UnknownCipherNameError):
        build_cipher("ROT13", "B")

def test_cipher_kind_names():
    assert CipherKind.names() == [
        "CAESAR_CIPHER", "NULL_CIPHER", "PLAYFAIR_CIPHER",
        "PSEUDO_ONE_TIME_PAD", "VIGNERE_CIPHER",
    ]
    assert CipherKind.parse("  Vignere_Cipher ") is CipherKind.VIGNERE_CIPHER

# ── run directly ─────────────────────────────────────────────────────────────
if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
