# geokernel/geometry/errors.py
"""Exceptions raised by the geometry kernel."""


class GeometryError(ValueError):
    """Base class for every error raised by geokernel."""


class InvalidConstructionError(GeometryError):
    """
    The inputs cannot define the requested entity.

    Raised for points too close together to span a line or a plane, and for
    line directions that are not unit length.
    """


class InvalidArgumentError(GeometryError):
    """An argument is outside the range an operation accepts."""
