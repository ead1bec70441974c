"""Tests for the Client model."""

from datetime import date, timedelta

import pytest

from library_flatstore.errors import EntityValidationError, MalformedRecordError
from library_flatstore.models.client import Client


class TestClientModel:
    def test_create_valid_client(self, client):
        assert client.phone == "0501234567"
        assert client.natural_key == "0501234567"

    def test_minimal_client(self):
        client = Client(phone="0671112233", password="12345678")

        assert client.name is None
        assert client.address is None
        assert client.registration_date is None

    @pytest.mark.parametrize("phone", ["050123456", "05012345678", "050-123-45", "phone12345"])
    def test_phone_must_be_ten_digits(self, phone):
        with pytest.raises(EntityValidationError) as exc_info:
            Client(phone=phone, password="securePass1")

        assert exc_info.value.errors == {"phone": ("Phone must be a 10-digit number.",)}

    @pytest.mark.parametrize("password", ["short", "        ", ""])
    def test_password_rules(self, password):
        with pytest.raises(EntityValidationError) as exc_info:
            Client(phone="0501234567", password=password)

        assert exc_info.value.errors == {
            "password": ("Password must be at least 8 characters long.",)
        }

    def test_password_exactly_eight_characters(self):
        assert Client(phone="0501234567", password="abcdefgh").password == "abcdefgh"

    def test_name_and_address_lengths(self):
        with pytest.raises(EntityValidationError) as exc_info:
            Client(phone="0501234567", password="securePass1", name="A", address="Kyiv")

        assert exc_info.value.errors == {
            "name": ("Name must be at least 2 characters long if provided.",),
            "address": ("Address must be at least 5 characters long if provided.",),
        }

    def test_registration_date_cannot_be_in_future(self):
        with pytest.raises(EntityValidationError) as exc_info:
            Client(
                phone="0501234567",
                password="securePass1",
                registration_date=date.today() + timedelta(days=1),
            )

        assert exc_info.value.fields == ["registration_date"]

    def test_password_hidden_from_repr(self, client):
        assert "securePass1" not in repr(client)


class TestClientEncoding:
    def test_header(self):
        assert Client.header() == "Phone,Password,Name,Address,RegistrationDate"

    def test_encode(self, client):
        assert client.encode() == (
            '0501234567,securePass1,Olena Kovalenko,"12 Khreshchatyk St, Kyiv",2023-03-14'
        )

    def test_round_trip(self, client):
        assert Client.decode(client.encode()) == client

    def test_round_trip_minimal(self):
        client = Client(phone="0671112233", password='pa,ss"word')
        assert Client.decode(client.encode()) == client

    def test_decode_wrong_field_count(self):
        with pytest.raises(MalformedRecordError):
            Client.decode("0501234567,securePass1")
