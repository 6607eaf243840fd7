from typing import Any, Dict, Protocol
import base64
import json
import os
import pickle

import yaml
from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from prefutils.errors import PrefConfigError, PrefStoreError


class Serializer(Protocol):
    """Serialize/deserialize the whole preference mapping for file stores.

    Implementations should be symmetric: `dump` -> bytes, `load` <- bytes.
    `extension` is appended to store paths that have no suffix.
    """

    extension: str

    def dump(self, value: Dict[str, Any]) -> bytes: ...

    def load(self, data: bytes) -> Dict[str, Any]: ...


class PickleSerializer:
    """Serializer using pickle (binary)."""

    extension = ".pkl"

    def dump(self, value: Dict[str, Any]) -> bytes:
        return pickle.dumps(value, protocol=pickle.HIGHEST_PROTOCOL)

    def load(self, data: bytes) -> Dict[str, Any]:
        return pickle.loads(data)


class JSONSerializer:
    """Serializer using JSON (text). Keeps the int/float distinction of values."""

    extension = ".json"

    def dump(self, value: Dict[str, Any]) -> bytes:
        return json.dumps(value, indent=2, sort_keys=True).encode("utf-8")

    def load(self, data: bytes) -> Dict[str, Any]:
        return json.loads(data.decode("utf-8"))


class YAMLSerializer:
    """Serializer using YAML (text)."""

    extension = ".yml"

    def dump(self, value: Dict[str, Any]) -> bytes:
        return yaml.safe_dump(value, sort_keys=True).encode("utf-8")

    def load(self, data: bytes) -> Dict[str, Any]:
        return yaml.safe_load(data.decode("utf-8")) or {}


class EncryptedSerializer:
        """Serializer that encrypts payloads using Fernet (symmetric, authenticated).

        Notes:
        - Provide either a Fernet `key` or a `password`. Password mode derives
            the key with PBKDF2 and stores a random salt and the iteration
            count in the frame so the loader can derive the same key.
        - `base_serializer` defaults to JSON and is set inside `__init__` to
            avoid a shared default instance.
        """

        extension = ".dat"

        def __init__(
            self,
            *,
            key: bytes | str | None = None,
            password: str | None = None,
            iterations: int = 390000,
            base_serializer: Serializer | None = None,
        ) -> None:
            if key is None and password is None:
                raise PrefConfigError("EncryptedSerializer requires either `key` or `password`")
            self._key = key.encode("ascii") if isinstance(key, str) else key
            self._password = password
            self._iterations = iterations
            self.base_serializer = base_serializer or JSONSerializer()

        def _derive_key(self, password: str, salt: bytes, iterations: int) -> bytes:
            kdf = PBKDF2HMAC(
                algorithm=hashes.SHA256(),
                length=32,
                salt=salt,
                iterations=iterations,
            )
            return base64.urlsafe_b64encode(kdf.derive(password.encode("utf-8")))

        def dump(self, value: Dict[str, Any]) -> bytes:
            """Serialize and encrypt value, returning a framed JSON blob."""
            inner = self.base_serializer.dump(value)

            if self._password is not None:
                salt = os.urandom(16)
                key = self._derive_key(self._password, salt, self._iterations)
                ct = Fernet(key).encrypt(inner)
                frame = {
                    "v": 1,
                    "mode": "password",
                    "kdf": "pbkdf2",
                    "iterations": self._iterations,
                    "salt": base64.urlsafe_b64encode(salt).decode("ascii"),
                    "ct": base64.urlsafe_b64encode(ct).decode("ascii"),
                }
                return json.dumps(frame).encode("utf-8")

            ct = Fernet(self._key).encrypt(inner)
            frame = {"v": 1, "mode": "key", "ct": base64.urlsafe_b64encode(ct).decode("ascii")}
            return json.dumps(frame).encode("utf-8")

        def load(self, data: bytes) -> Dict[str, Any]:
            """Parse framed blob, derive key if needed, decrypt and deserialize."""
            frame = json.loads(data.decode("utf-8"))
            mode = frame.get("mode")
            if mode == "password":
                if self._password is None:
                    raise PrefConfigError("serializer was not configured with a password")
                salt = base64.urlsafe_b64decode(frame["salt"].encode("ascii"))
                iterations = frame.get("iterations", self._iterations)
                key = self._derive_key(self._password, salt, iterations)
            elif mode == "key":
                if self._key is None:
                    raise PrefConfigError("serializer was not configured with a key")
                key = self._key
            else:
                raise PrefStoreError("unknown frame format")

            ct = base64.urlsafe_b64decode(frame["ct"].encode("ascii"))
            try:
                pt = Fernet(key).decrypt(ct)
            except InvalidToken as ex:
                raise PrefStoreError("failed to decrypt preference store: invalid token") from ex
            return self.base_serializer.load(pt)


SERIALIZERS = {
    "json": JSONSerializer,
    "yaml": YAMLSerializer,
    "pickle": PickleSerializer,
}


def get_serializer(name: str, *, key: bytes | str | None = None, password: str | None = None) -> Serializer:
    """Return a serializer instance for `name` (json, yaml, pickle, encrypted)."""
    if name == "encrypted":
        return EncryptedSerializer(key=key, password=password)
    try:
        return SERIALIZERS[name]()
    except KeyError:
        raise PrefConfigError(f"unknown serializer {name!r}") from None
