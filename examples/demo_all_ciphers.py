"""
clack_cipher — Live Demo: Every Cipher + Two Sessions Talking
==============================================================
Run:  python examples/demo_all_ciphers.py

Shows each cipher preparing, encrypting and decrypting a real message,
then two CipherManagers negotiating options and exchanging messages
the way two chat endpoints would.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from clack_cipher.alphabet import group
from clack_cipher.ciphers  import CipherKind, build_cipher
from clack_cipher.manager  import CipherManager
from clack_cipher.options  import OptionCommand

LINE = "═" * 70
MSG  = "Meet me at the usual place at ten rather than eight o'clock."

KEYS = {
    CipherKind.NULL_CIPHER:         "KEY",
    CipherKind.CAESAR_CIPHER:       "D",
    CipherKind.VIGNERE_CIPHER:      "LEMON",
    CipherKind.PLAYFAIR_CIPHER:     "Charles Wheatstone",
    CipherKind.PSEUDO_ONE_TIME_PAD: "a phrase both sides know and nobody else does",
}

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=' %(message)s')

    print(f"\n{LINE}")
    print("  clack_cipher — Cipher Suite Demo")
    print(LINE)
    print(f"  Message: {MSG}\n")

    # ── every cipher ─────────────────────────────────────────────────────────
    for kind, key in KEYS.items():
        header(f"{kind.name}  (key={key!r})")
        sender   = build_cipher(kind, key)
        receiver = build_cipher(kind, key)     # the peer builds its own
        prep = sender.prepare(MSG)
        ct   = sender.encrypt(prep)
        pt   = receiver.decrypt(ct)
        ok("Prepared",  group(prep, 5) if kind is not CipherKind.NULL_CIPHER else prep)
        ok("Encrypted", group(ct, 5) if kind is not CipherKind.NULL_CIPHER else ct)
        ok("Decrypted", pt)
        assert pt == prep

    # ── two sessions ─────────────────────────────────────────────────────────
    header("Two sessions negotiating over OPTION commands")
    alice = CipherManager()
    bob   = CipherManager()
    for args in (["CIPHER_NAME", "vignere_cipher"],
                 ["CIPHER_KEY", "not valid"],
                 ["CIPHER_KEY", "LEMON"],
                 ["CIPHER_NAME", "pseudo_one_time_pad"],
                 ["CIPHER_KEY", KEYS[CipherKind.PSEUDO_ONE_TIME_PAD]],
                 ["CIPHER_ENABLE", "maybe"],
                 ["CIPHER_ENABLE", "on"],
                 ["CIPHER_NAME"]):
        cmd = OptionCommand.from_args(args)
        ok(f"alice {' '.join(args)[:40]}", alice.process(cmd))
        bob.process(cmd)

    for sender, receiver, text in ((alice, bob,   "Hello Bob, are we in step?"),
                                   (bob,   alice, "We are, Alice."),
                                   (alice, bob,   "Then let's talk.")):
        wire = sender.encode_outgoing(text)
        ok("wire", group(wire, 5))
        ok("read", receiver.decode_incoming(wire))

    print(f"\n{LINE}")
    print("  All ciphers: PASSED")
    print(LINE + "\n")
