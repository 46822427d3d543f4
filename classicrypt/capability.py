"""
Cipher Capability

Both ciphers expose the same two operations, encrypt and decrypt over
bytes. CipherAdapter wraps any object with that capability and adds text
and whole-file helpers on top.
"""

import logging
from pathlib import Path
from typing import Protocol, Union, runtime_checkable

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = 'utf-8'

PathLike = Union[str, Path]


@runtime_checkable
class CipherCapability(Protocol):
    """Anything that can encrypt and decrypt byte strings."""

    def encrypt(self, data: bytes) -> bytes:
        ...

    def decrypt(self, data: bytes) -> bytes:
        ...


class CipherAdapter:
    """
    Text and file conveniences over a cipher.
    """

    def __init__(self, cipher: CipherCapability, encoding: str = DEFAULT_ENCODING):
        """
        Wrap a cipher.

        Args:
            cipher: Any object with encrypt and decrypt methods
            encoding: Text encoding used by the text helpers
        """
        if not isinstance(cipher, CipherCapability):
            raise TypeError(f"{type(cipher).__name__} does not provide encrypt and decrypt")
        self.cipher = cipher
        self.encoding = encoding

    def encrypt(self, data: bytes) -> bytes:
        return self.cipher.encrypt(data)

    def decrypt(self, data: bytes) -> bytes:
        return self.cipher.decrypt(data)

    def encrypt_text(self, text: str) -> bytes:
        """Encrypt a string."""
        return self.cipher.encrypt(text.encode(self.encoding))

    def decrypt_text(self, data: bytes) -> str:
        """Decrypt bytes into a string."""
        return self.cipher.decrypt(data).decode(self.encoding)

    def encrypt_file(self, input_path: PathLike, output_path: PathLike) -> None:
        """
        Encrypt a whole file.

        Args:
            input_path: File to read the plaintext from
            output_path: File to write the ciphertext to
        """
        data = Path(input_path).read_bytes()
        Path(output_path).write_bytes(self.cipher.encrypt(data))
        logger.info("Encrypted %s to %s", input_path, output_path)

    def decrypt_file(self, input_path: PathLike, output_path: PathLike) -> None:
        """
        Decrypt a whole file.

        Args:
            input_path: File to read the ciphertext from
            output_path: File to write the plaintext to
        """
        data = Path(input_path).read_bytes()
        Path(output_path).write_bytes(self.cipher.decrypt(data))
        logger.info("Decrypted %s to %s", input_path, output_path)
