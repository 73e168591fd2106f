from enum import StrEnum


class GeoJsonType(StrEnum):
    FEATURE = 'Feature'
    FEATURE_COLLECTION = 'FeatureCollection'
    GEOMETRY_COLLECTION = 'GeometryCollection'
    LINE_STRING = 'LineString'
    MULTI_LINE_STRING = 'MultiLineString'
    MULTI_POINT = 'MultiPoint'
    MULTI_POLYGON = 'MultiPolygon'
    POINT = 'Point'
    POLYGON = 'Polygon'
