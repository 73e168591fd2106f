class GeoJsonError(ValueError):
    """Base class for every error raised while building a GeoJSON document."""


class NotFeatureCollection(GeoJsonError):
    def __init__(self, actual_type):
        self.actual_type = actual_type
        super().__init__(f'expect a FeatureCollection, {actual_type} given')


class IllegalGeometryType(GeoJsonError):
    def __init__(self, geometry_type, message: str | None = None):
        self.geometry_type = geometry_type
        super().__init__(message or f'Illegal geometry.type given: {geometry_type!r}')


class MissingGeometryType(IllegalGeometryType):
    def __init__(self):
        super().__init__(None, 'geometry.type is required')
