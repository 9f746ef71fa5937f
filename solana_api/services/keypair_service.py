"""Keypair generation, message signing and signature verification."""

from nacl.exceptions import BadSignatureError
from nacl.signing import VerifyKey
from solders.keypair import Keypair

from solana_api.models.responses import KeypairData, SignMessageData, VerifyMessageData
from solana_api.services.base_service import BaseService
from solana_api.utils.validation import (
    b58encode_str,
    b64encode_str,
    parse_keypair,
    parse_signature,
    parse_verifying_key,
)


class KeypairService(BaseService):
    """Ed25519 operations over caller-supplied key material."""

    def generate_keypair(self) -> KeypairData:
        """Generate a new keypair from the OS random source.

        Returns:
            The base58 public key and base58 64-byte secret
        """
        keypair = Keypair()
        return KeypairData(
            pubkey=str(keypair.pubkey()),
            secret=b58encode_str(bytes(keypair)),
        )

    def sign_message(self, message: str, secret: str) -> SignMessageData:
        """Sign the UTF-8 bytes of a message.

        Args:
            message: Message text
            secret: Base58 64-byte secret key

        Returns:
            Base64 signature, base58 public key and the message

        Raises:
            EncodingError: If the secret is not base58
            InvalidKeyMaterialError: If the secret is not a valid keypair
        """
        keypair = parse_keypair(secret)
        signature = keypair.sign_message(message.encode("utf-8"))
        self.logger.debug(f"Signed {len(message)} character message for {keypair.pubkey()}")
        return SignMessageData(
            signature=b64encode_str(bytes(signature)),
            public_key=str(keypair.pubkey()),
            message=message,
        )

    def verify_message(self, message: str, signature: str, pubkey: str) -> VerifyMessageData:
        """Verify a signature over the UTF-8 bytes of a message.

        The public key is checked before the signature. A signature that
        parses but does not verify is reported as ``valid=False``, not raised.

        Raises:
            EncodingError: If the pubkey is not base58 or the signature not base64
            InvalidKeyMaterialError: If either does not parse
        """
        verifying_key = parse_verifying_key(pubkey)
        parsed_signature = parse_signature(signature)

        # libsodium rejects non-canonical signatures and small-order keys
        try:
            VerifyKey(bytes(verifying_key)).verify(message.encode("utf-8"), bytes(parsed_signature))
            valid = True
        except BadSignatureError:
            valid = False

        return VerifyMessageData(valid=valid, message=message, pubkey=pubkey)
