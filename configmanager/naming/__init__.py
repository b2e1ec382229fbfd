from .field_name_mapper import FieldNameMapper, NameMapping, name_mapping

__all__ = [
    "FieldNameMapper",
    "NameMapping",
    "name_mapping",
]
