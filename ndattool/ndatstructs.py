from construct import *

def _minus_one(subcon):
    # counts are stored as n - 1, 0xFFFF wraps to an empty list
    return ExprAdapter(subcon,
        lambda obj, ctx: (obj + 1) & 0xFFFF,
        lambda obj, ctx: (obj - 1) & 0xFFFF)

Header = Struct(
    "data_offset" / Int32ub,
    "map_offset"  / Int32ub,
    "data_length" / Int32ub,
    "map_length"  / Int32ub,
)

# Only the list offsets are used, the first 24 bytes are a header copy,
# the next handle, file ref and attributes
MapHeader = Struct(
    Padding(24),
    "type_list_offset" / Int16ub,
    "name_list_offset" / Int16ub,
)

TypeListHeader = Struct(
    "count" / _minus_one(Int16ub),
)

TypeEntry = Struct(
    "tag"      / Bytes(4),
    "quantity" / _minus_one(Int16ub),
    "offset"   / Int16ub,
)

ItemEntry = Struct(
    "id"          / Int16ub,
    "name_offset" / Int16ub,
    "attributes"  / Int8ub,
    "data_offset" / Int24ub,
    Padding(4), # handle
)

DataLength = Int32ub
NameLength = Int8ub

NO_NAME = 0xFFFF

__all__ = [
    "Header", "MapHeader", "TypeListHeader", "TypeEntry", "ItemEntry",
    "DataLength", "NameLength", "NO_NAME",
]
