import json
import math

import astropy.units as u
import pytest

from solex.api.errors import DecodeError
from solex.api.models import CelestialBody, Mass, decode_body, decode_body_list

mars = {
    "name": "Mars",
    "id": "mars",
    "englishName": "Mars",
    "isPlanet": True,
    "mass": {"massValue": 6.41712, "massExponent": 23},
    "density": 3.9341,
    "gravity": 3.71,
    "escape": 5030.0,
    "meanRadius": 3389.5,
    "equaRadius": 3396.19,
    "polarRadius": 3376.2,
    "flattening": 0.00589,
    "sideralOrbit": 686.98,
    "sideralRotation": 24.6229,
    "axialTilt": 25.19,
    "avgTemp": 210,
    "bodyType": "Planet",
}


def test_full_body_decodes_every_field() -> None:
    body = CelestialBody.from_dict(mars)

    assert body.name == "Mars"
    assert body.id == "mars"
    assert body.english_name == "Mars"
    assert body.is_planet is True
    assert body.mass == Mass(value=6.41712, exponent=23)
    assert body.mean_radius == 3389.5
    assert body.sideral_rotation == 24.6229
    assert body.avg_temp == 210
    assert body.body_type == "Planet"


def test_minimal_body_leaves_optional_fields_absent() -> None:
    body = CelestialBody.from_dict({"name": "Lune", "id": "lune"})

    assert body.english_name is None
    assert body.is_planet is False
    assert body.mass is None
    for attr in ("density", "gravity", "escape", "mean_radius", "equa_radius", "polar_radius",
                 "flattening", "sideral_orbit", "sideral_rotation", "axial_tilt", "avg_temp",
                 "body_type"):
        assert getattr(body, attr) is None


def test_unexpected_shapes_resolve_to_absent() -> None:
    body = CelestialBody.from_dict({
        "name": "Ceres",
        "id": "ceres",
        "englishName": 12,
        "isPlanet": "yes",
        "mass": "heavy",
        "density": "2.16",
        "gravity": True,
        "escape": None,
        "meanRadius": [469.7],
        "avgTemp": float("nan"),
        "bodyType": {"kind": "Dwarf Planet"},
    })

    assert body.english_name is None
    assert body.is_planet is False
    assert body.mass is None
    assert body.density is None
    assert body.gravity is None
    assert body.escape is None
    assert body.mean_radius is None
    assert body.avg_temp is None
    assert body.body_type is None


@pytest.mark.parametrize("data", [
    {"id": "mars"},
    {"name": "Mars"},
    {"name": None, "id": "mars"},
    {"name": "Mars", "id": 4},
    ["Mars", "mars"],
])
def test_missing_required_fields_fail(data) -> None:
    with pytest.raises(DecodeError):
        CelestialBody.from_dict(data)


class TestMass:
    """tests the `Mass` record"""

    def test_partial_mass(self):
        mass = Mass.from_dict({"massValue": 1.2})
        assert mass == Mass(value=1.2, exponent=None)
        assert not mass.is_complete
        assert mass.to_quantity() is None

    def test_empty_mass_object_is_present_but_incomplete(self):
        mass = Mass.from_dict({})
        assert mass is not None
        assert not mass.is_complete

    def test_exponent_must_be_an_integer(self):
        assert Mass.from_dict({"massValue": 1.2, "massExponent": 22.5}).exponent is None

    def test_quantity_in_kilograms(self):
        quantity = Mass(value=6.42, exponent=23).to_quantity()
        assert quantity.unit == u.kg
        assert math.isclose(quantity.value, 6.42e23)


def test_quantity_uses_attribute_units() -> None:
    body = CelestialBody.from_dict(mars)

    assert body.quantity("mean_radius").to(u.m).value == pytest.approx(3389500.)
    assert body.quantity("sideral_orbit").to(u.year).value == pytest.approx(1.8808, rel=1e-4)
    assert body.quantity("mass").unit == u.kg
    assert CelestialBody.from_dict({"name": "X", "id": "x"}).quantity("density") is None


def test_round_trip_reproduces_api_fields() -> None:
    body = CelestialBody.from_dict(mars)
    assert body.to_dict() == mars
    assert CelestialBody.from_dict(body.to_dict()) == body


def test_round_trip_of_minimal_body() -> None:
    data = CelestialBody.from_dict({"name": "Lune", "id": "lune"}).to_dict()
    assert data == {"name": "Lune", "id": "lune", "isPlanet": False}


class TestDecoding:
    """tests decoding of raw response bodies"""

    def test_detail_response(self):
        body = decode_body(json.dumps(mars))
        assert body.name == "Mars"

    def test_list_response(self):
        text = json.dumps({"bodies": [mars, {"name": "Moon", "id": "lune", "isPlanet": False}]})
        bodies = decode_body_list(text)
        assert [b.id for b in bodies] == ["mars", "lune"]

    def test_empty_list_response(self):
        assert decode_body_list('{"bodies": []}') == []

    @pytest.mark.parametrize("text", ["", "<html>oops</html>", "{\"name\": "])
    def test_invalid_json(self, text):
        with pytest.raises(DecodeError):
            decode_body(text)

    @pytest.mark.parametrize("text", ['{}', '[]', '{"bodies": {"name": "Moon"}}'])
    def test_list_without_bodies_array(self, text):
        with pytest.raises(DecodeError):
            decode_body_list(text)

    def test_list_with_bad_entry(self):
        with pytest.raises(DecodeError):
            decode_body_list('{"bodies": [{"name": "Moon"}]}')


def test_deeply_nested_response_is_a_decode_error() -> None:
    with pytest.raises(DecodeError):
        decode_body_list("[" * 100000 + "]" * 100000)
