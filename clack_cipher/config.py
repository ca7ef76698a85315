"""
Central configuration for clack_cipher.
Avoids hardcoded literals spread across files.
"""

# Manager defaults
DEFAULT_ENABLED = False
DEFAULT_CIPHER  = "NULL_CIPHER"
DEFAULT_KEY     = "KEY"

# Accepted spellings for the CIPHER_ENABLE option (compared uppercased)
TRUE_SYNONYMS  = ("TRUE", "YES", "ON", "1")
FALSE_SYNONYMS = ("FALSE", "NO", "OFF", "0")

# Playfair
PLAYFAIR_SIZE       = 5
PLAYFAIR_FILLER     = "X"   # splits a doubled letter
PLAYFAIR_FILLER_ALT = "Q"   # splits a doubled filler
PLAYFAIR_PAD        = "Z"   # evens out the length
PLAYFAIR_PAD_ALT    = "X"   # used when the last letter is already the pad

# Pseudo one-time pad
OTP_SPLIT       = 32            # key chars hashed into the low half of the seed
KEYSTREAM_NONCE = b"\x00" * 16  # ChaCha20 counter || nonce; fixed so peers agree
KEYSTREAM_BLOCK = 64            # bytes pulled from the stream per refill
