import astropy.units as u

API_BASE_URL = "https://api.le-systeme-solaire.net/rest/bodies/"

# physical attributes in display order: (attribute, json key, label, unit)
PHYSICAL_ATTRIBUTES = (
    ("density", "density", "Density", u.g / u.cm ** 3),
    ("gravity", "gravity", "Gravity", u.m / u.s ** 2),
    ("escape", "escape", "Escape Velocity", u.m / u.s),
    ("mean_radius", "meanRadius", "Mean Radius", u.km),
    ("equa_radius", "equaRadius", "Equatorial Radius", u.km),
    ("polar_radius", "polarRadius", "Polar Radius", u.km),
    ("flattening", "flattening", "Flattening", u.dimensionless_unscaled),
    ("sideral_orbit", "sideralOrbit", "Orbital Period", u.day),
    ("sideral_rotation", "sideralRotation", "Rotation Period", u.hour),
    ("axial_tilt", "axialTilt", "Axial Tilt", u.deg),
    ("avg_temp", "avgTemp", "Average Temperature", u.K),
)
MASS_UNIT = u.kg

# presenter messages
NOT_AVAILABLE = "not available"
MASS_INCOMPLETE = "Mass data is incomplete or not available."
MASS_MISSING = "No mass data provided by the API."
