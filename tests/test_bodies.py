import json
from unittest.mock import Mock, patch

import pytest
import requests

from solex.api.bodies import SolarSystemOpenData
from solex.api.errors import DecodeError, TransportError
from solex.constants import API_BASE_URL


def ok_response(payload):
    response = Mock(spec=requests.Response)
    response.text = payload if isinstance(payload, str) else json.dumps(payload)
    response.content = response.text.encode()
    response.status_code = 200
    response.raise_for_status.return_value = None
    return response


class TestBuildUrl:
    """tests the request builder"""

    def test_collection_endpoint(self):
        assert SolarSystemOpenData().build_url() == API_BASE_URL
        assert SolarSystemOpenData().build_url("") == API_BASE_URL

    def test_detail_endpoint(self):
        assert SolarSystemOpenData().build_url("mars") == API_BASE_URL + "mars"

    def test_identifier_is_a_single_path_segment(self):
        url = SolarSystemOpenData().build_url("../planets?x=1")
        assert url == API_BASE_URL + "..%2Fplanets%3Fx%3D1"

    def test_custom_base_url_gets_trailing_slash(self):
        client = SolarSystemOpenData(base_url="http://localhost:8080/rest/bodies")
        assert client.build_url("lune") == "http://localhost:8080/rest/bodies/lune"


class TestFetch:
    """tests the transport"""

    @patch("solex.api.bodies.requests.get", autospec=True)
    def test_single_get_returns_body(self, mock_get):
        mock_get.return_value = ok_response({"bodies": []})

        client = SolarSystemOpenData()
        assert client.fetch(API_BASE_URL) == '{"bodies": []}'
        mock_get.assert_called_once_with(API_BASE_URL, timeout=None)

    @patch("solex.api.bodies.requests.get", autospec=True)
    def test_connection_refused(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError("Connection refused")

        with pytest.raises(TransportError, match="Connection refused") as excinfo:
            SolarSystemOpenData().fetch(API_BASE_URL)
        assert isinstance(excinfo.value.__cause__, requests.exceptions.ConnectionError)
        assert mock_get.call_count == 1

    @patch("solex.api.bodies.requests.get", autospec=True)
    def test_http_error_status(self, mock_get):
        response = ok_response("")
        response.status_code = 404
        response.raise_for_status.side_effect = requests.exceptions.HTTPError("404 Client Error: Not Found")
        mock_get.return_value = response

        with pytest.raises(TransportError, match="404"):
            SolarSystemOpenData().fetch(API_BASE_URL + "vulcan")
        assert mock_get.call_count == 1

    @patch("solex.api.bodies.requests.get", autospec=True)
    def test_timeout(self, mock_get):
        mock_get.side_effect = requests.exceptions.Timeout("timed out")

        with pytest.raises(TransportError):
            SolarSystemOpenData().fetch(API_BASE_URL)


@patch("solex.api.bodies.requests.get", autospec=True)
def test_list_bodies(mock_get) -> None:
    mock_get.return_value = ok_response({"bodies": [{"name": "Moon", "id": "lune", "isPlanet": False},
                                                    {"name": "Earth", "id": "terre", "isPlanet": True}]})

    bodies = SolarSystemOpenData().list_bodies()

    assert [b.name for b in bodies] == ["Moon", "Earth"]
    mock_get.assert_called_once_with(API_BASE_URL, timeout=None)


@patch("solex.api.bodies.requests.get", autospec=True)
def test_body_details(mock_get) -> None:
    mock_get.return_value = ok_response({"name": "Mars", "id": "mars"})

    body = SolarSystemOpenData().body_details("mars")

    assert body.id == "mars"
    mock_get.assert_called_once_with(API_BASE_URL + "mars", timeout=None)


@patch("solex.api.bodies.requests.get", autospec=True)
def test_body_details_with_wrong_shape(mock_get) -> None:
    mock_get.return_value = ok_response({"message": "not found"})

    with pytest.raises(DecodeError):
        SolarSystemOpenData().body_details("vulcan")


def test_undecodable_command_line_name_is_quoted() -> None:
    # non UTF-8 bytes from argv arrive as lone surrogates
    assert SolarSystemOpenData().build_url("\udcff") == API_BASE_URL + "%FF"
