import base64
import binascii
import string
from dataclasses import dataclass

from cryptography.hazmat.primitives import hashes, hmac
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .constants import CIPHER_KEY_LEN, IV_LEN, KEY_LEN
from .errors import InvalidKey, MalformedBlock


# ---------- Key material ----------
@dataclass(frozen=True)
class KeyMaterial:
    cipher_key: bytes
    iv_secret: bytes

    @classmethod
    def from_bytes(cls, raw: bytes) -> "KeyMaterial":
        if len(raw) != KEY_LEN:
            raise InvalidKey(f"key must be {KEY_LEN} bytes, got {len(raw)}")
        return cls(raw[:CIPHER_KEY_LEN], raw[CIPHER_KEY_LEN:])

    def to_bytes(self) -> bytes:
        return self.cipher_key + self.iv_secret


# ---------- Derivation (block IV) ----------
def derive_iv(plaintext: bytes, iv_secret: bytes) -> str:
    """Return the IV for a block as IV_LEN lowercase hex characters.

    The IV depends only on the plaintext and the secret, so an unchanged block
    always encrypts to the same payload and git sees no diff.
    """
    h = hmac.HMAC(iv_secret, hashes.SHA1())
    h.update(plaintext)
    return h.finalize().hex()[:IV_LEN]


def _aes_ctr(key: KeyMaterial, iv: str) -> Cipher:
    return Cipher(algorithms.AES(key.cipher_key), modes.CTR(iv.encode("ascii")))


# ---------- Blocks ----------
def encrypt_block(val: str, key: KeyMaterial) -> str:
    pt = val.encode("utf-8")
    iv = derive_iv(pt, key.iv_secret)
    enc = _aes_ctr(key, iv).encryptor()
    ct = enc.update(pt) + enc.finalize()
    return iv + base64.b64encode(ct).decode("ascii")


def decrypt_block(val: str, key: KeyMaterial) -> str:
    iv, body = val[:IV_LEN], val[IV_LEN:]
    if len(iv) != IV_LEN or not all(c in string.hexdigits for c in iv):
        raise MalformedBlock(f"bad block IV: {val[:20]!r}")
    try:
        ct = base64.b64decode(body, validate=True)
    except binascii.Error as e:
        raise MalformedBlock(f"bad block payload {val[:20]!r}: {e}") from e
    dec = _aes_ctr(key, iv).decryptor()
    pt = dec.update(ct) + dec.finalize()
    try:
        return pt.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedBlock(f"block {val[:20]!r} did not decrypt to text") from e
