import base64
import binascii
import hashlib

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.serialization import (
    Encoding, PublicFormat, PrivateFormat, NoEncryption, load_pem_public_key, load_pem_private_key
)


def generate_private_key():
    return ec.generate_private_key(ec.SECP256K1())


def get_public_key(private_key):
    return private_key.public_key()


def sign_message(private_key, message: bytes) -> bytes:
    return private_key.sign(message, ec.ECDSA(hashes.SHA256()))


def verify_signature(address: str, message: bytes, signature_b64: str) -> bool:
    """
    Checks that `signature_b64` is a valid ECDSA signature of `message` under
    the public key serialized in `address`. Malformed keys or signatures
    verify as False.
    """
    if not signature_b64:
        return False
    try:
        public_key = deserialize_public_key(address)
        signature = base64.b64decode(signature_b64, validate=True)
        public_key.verify(signature, message, ec.ECDSA(hashes.SHA256()))
        return True
    except InvalidSignature:
        return False
    except (binascii.Error, ValueError, TypeError, UnsupportedAlgorithm):
        return False


def sha256_hash(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def serialize_public_key(public_key) -> str:
    pem = public_key.public_bytes(encoding=Encoding.PEM, format=PublicFormat.SubjectPublicKeyInfo)
    return base64.b64encode(pem).decode('utf-8')


def deserialize_public_key(address: str):
    public_key = load_pem_public_key(base64.b64decode(address, validate=True))
    if not isinstance(public_key, ec.EllipticCurvePublicKey):
        raise TypeError("Address does not hold an elliptic curve public key.")
    return public_key


def serialize_private_key(private_key) -> str:
    pem = private_key.private_bytes(
        encoding=Encoding.PEM,
        format=PrivateFormat.PKCS8,
        encryption_algorithm=NoEncryption()
    )
    return base64.b64encode(pem).decode('utf-8')


def deserialize_private_key(private_key_b64: str):
    return load_pem_private_key(base64.b64decode(private_key_b64), password=None)


def address_of(private_key) -> str:
    return serialize_public_key(get_public_key(private_key))
