from geojson_builder.enums.geojson_type import GeoJsonType


LEAF_GEOMETRY_TYPES: frozenset[str] = frozenset(t.value for t in (
    GeoJsonType.LINE_STRING,
    GeoJsonType.MULTI_LINE_STRING,
    GeoJsonType.MULTI_POINT,
    GeoJsonType.MULTI_POLYGON,
    GeoJsonType.POINT,
    GeoJsonType.POLYGON,
))

# Feature and GeometryCollection are not geometry tags, but have always been accepted.
LENIENT_GEOMETRY_TYPES: frozenset[str] = LEAF_GEOMETRY_TYPES | {
    GeoJsonType.FEATURE.value,
    GeoJsonType.GEOMETRY_COLLECTION.value,
}

ID_STRATEGY_RANDOM = 'random'
ID_STRATEGY_COUNTER = 'counter'

PACKAGE_LOGGER_NAME = 'geojson_builder'
