"""
オブジェクトID生成

タイムスタンプ・シードのハッシュ・ランダムなカウンタを連結した
32桁の16進数IDを生成します。同じシードでも呼び出しごとに
異なるIDになり得ます（フィンガープリントではありません）。
"""

import hashlib
import random
import string
import struct
import time
from typing import Optional

OUT_LENGTH = 32
HASH_LENGTH = 8
SEED_LENGTH = 16

_SEED_CHARS = string.ascii_letters + string.digits


def generate_object_id(seed: Optional[str] = None) -> str:
    """
    オブジェクトIDを生成

    構成: タイムスタンプ(4バイト) + SHA-256の先頭8バイト + カウンタ(4バイト)

    Args:
        seed: ハッシュ対象の文字列（省略時は16文字のランダム英数字）

    Returns:
        32文字の小文字16進数文字列

    Example:
        >>> oid = generate_object_id('SCOTT$DOCS$CONTENT$AAAR3sAAEAAAACXAAA')
        >>> len(oid)
        32
    """
    if not seed:
        seed = ''.join(random.choice(_SEED_CHARS) for _ in range(SEED_LENGTH))

    timestamp_bin = struct.pack('>I', int(time.time()) & 0xFFFFFFFF)
    hash_bin = hashlib.sha256(seed.encode('utf-8')).digest()[:HASH_LENGTH]
    counter_bin = struct.pack('>I', random.getrandbits(32))

    object_id = (timestamp_bin + hash_bin + counter_bin).hex()
    return object_id.zfill(OUT_LENGTH)[:OUT_LENGTH]
