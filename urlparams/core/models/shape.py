from enum import StrEnum


class Shape(StrEnum):
    bool = "bool"
    int = "int"
    float = "float"
    char = "char"
    str = "str"
    bytes = "bytes"
    none = "none"
    some = "some"
    unit = "unit"
    unit_struct = "unit struct"
    unit_variant = "unit variant"
    newtype_struct = "newtype struct"
    newtype_variant = "newtype variant"
    seq = "seq"
    tuple = "tuple"
    tuple_struct = "tuple struct"
    tuple_variant = "tuple variant"
    map = "map"
    struct = "struct"
    struct_variant = "struct variant"
