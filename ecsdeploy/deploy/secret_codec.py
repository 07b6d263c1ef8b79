# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
import base64
import binascii
import re
import botocore.exceptions
from ..exceptions import EncryptionError, DecryptFormatError, DecryptBackendError
import logging

logger = logging.getLogger(__name__)

# encrypted values are stored as ${<base64 ciphertext>}
MARKER_EXPR = re.compile(r'\$\{(.*)\}', re.DOTALL)

def is_marker(value):
    if not isinstance(value, str): return False
    return MARKER_EXPR.fullmatch(value) is not None

class SecretCodec:
    """Wraps KMS encrypt/decrypt around the ${...} marker format."""

    def __init__(self, kms_client):
        self.kms_client = kms_client

    def encrypt(self, key_id, plaintext):
        try:
            response = self.kms_client.encrypt(KeyId=key_id, Plaintext=str(plaintext).encode("utf-8"))
        except (botocore.exceptions.ClientError, botocore.exceptions.BotoCoreError) as error:
            logger.error("Unable to encrypt value with %s key %s"%(key_id, error))
            raise EncryptionError("Unable to encrypt value with %s key: %s"%(key_id, error)) from error
        ciphertext = response.get("CiphertextBlob", b"")
        if isinstance(ciphertext, str):
            ciphertext = ciphertext.encode("utf-8")
        return "${%s}"%(base64.b64encode(ciphertext).decode("ascii"))

    def decrypt(self, marker):
        mo = MARKER_EXPR.fullmatch(marker) if isinstance(marker, str) else None
        if mo is None:
            raise DecryptFormatError("Value is not an encrypted ${...} marker")
        if len(mo.group(1)) <= 0:
            raise DecryptFormatError("Encrypted marker ${} holds no ciphertext")
        try:
            ciphertext = base64.b64decode(mo.group(1), validate=True)
        except (binascii.Error, ValueError) as error:
            raise DecryptFormatError("Encrypted marker does not hold base64 data: %s"%(error)) from error
        try:
            response = self.kms_client.decrypt(CiphertextBlob=ciphertext)
        except (botocore.exceptions.ClientError, botocore.exceptions.BotoCoreError) as error:
            logger.error("Unable to decrypt value %s"%(error))
            raise DecryptBackendError("Unable to decrypt value: %s"%(error)) from error
        plaintext = response.get("Plaintext", b"")
        if isinstance(plaintext, bytes):
            try:
                plaintext = plaintext.decode("utf-8")
            except UnicodeDecodeError as error:
                raise DecryptBackendError("Decrypted value is not UTF-8 text: %s"%(error)) from error
        return plaintext
