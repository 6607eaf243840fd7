import pytest
from cryptography.fernet import Fernet

from prefutils.errors import PrefConfigError, PrefStoreError
from prefutils.storage.serializer import (
    EncryptedSerializer,
    JSONSerializer,
    YAMLSerializer,
    get_serializer,
)

PREFS = {"Scores/Count": 2, "Scores/0": 10, "Scores/1": 20, "Volume": 0.5, "Name": "ada"}


@pytest.mark.parametrize("name", ["json", "yaml", "pickle"])
def test_plain_serializers_keep_value_types(name):
    ser = get_serializer(name)
    loaded = ser.load(ser.dump(PREFS))
    assert loaded == PREFS
    assert isinstance(loaded["Volume"], float)
    assert isinstance(loaded["Scores/0"], int)


def test_json_output_is_readable_text():
    assert b'"Name": "ada"' in JSONSerializer().dump(PREFS)


def test_yaml_empty_document_loads_as_empty_mapping():
    assert YAMLSerializer().load(b"") == {}


def test_unknown_serializer():
    with pytest.raises(PrefConfigError):
        get_serializer("xml")


def test_encrypted_password_mode():
    ser = EncryptedSerializer(password="pw", iterations=1000)
    blob = ser.dump(PREFS)
    assert b"ada" not in blob
    assert EncryptedSerializer(password="pw").load(blob) == PREFS


def test_encrypted_key_mode():
    key = Fernet.generate_key()
    blob = get_serializer("encrypted", key=key).dump(PREFS)
    assert get_serializer("encrypted", key=key.decode("ascii")).load(blob) == PREFS


def test_encrypted_wrong_password():
    blob = EncryptedSerializer(password="pw", iterations=1000).dump(PREFS)
    with pytest.raises(PrefStoreError):
        EncryptedSerializer(password="other").load(blob)


def test_encrypted_requires_key_or_password():
    with pytest.raises(PrefConfigError):
        EncryptedSerializer()


def test_encrypted_mode_mismatch():
    blob = EncryptedSerializer(password="pw", iterations=1000).dump(PREFS)
    with pytest.raises(PrefConfigError):
        EncryptedSerializer(key=Fernet.generate_key()).load(blob)
