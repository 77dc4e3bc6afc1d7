"""Shape checks for identifiers taken from request paths.

Applied at the HTTP edge only; services accept whatever they are given.
"""

import re

from src.tv_common.errors import InvalidPublicKeyError, InvalidTransactionIdError

# StrKey account id: 'G' + 55 base32 chars (checksum not verified here)
_PUBLIC_KEY_RE = re.compile(r"^G[A-Z2-7]{55}$")
# Transaction hash: 32 bytes hex
_TX_HASH_RE = re.compile(r"^[0-9a-f]{64}$")


def validate_public_key(public_key: str) -> str:
    key = public_key.strip()
    if not _PUBLIC_KEY_RE.match(key):
        raise InvalidPublicKeyError(public_key)
    return key


def validate_tx_hash(tx_id: str) -> str:
    tx_hash = tx_id.strip().lower()
    if not _TX_HASH_RE.match(tx_hash):
        raise InvalidTransactionIdError(tx_id)
    return tx_hash
