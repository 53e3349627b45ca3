"""
Nova data (.ndat) files are classic Mac OS resource forks stored as plain
files: a 16 byte header pointing at a data region of length prefixed
payloads and a map region describing every resource.

Every offset comes from the file itself, so each read is checked against
the buffer before parsing and reported as a DecodeError subclass.
"""

import logging
from collections import namedtuple
from pathlib import Path

from ndattool.macroman import decode_mac_roman
from ndattool.ndatstructs import (Header, MapHeader, TypeListHeader, TypeEntry,
    ItemEntry, DataLength, NameLength, NO_NAME)

logger = logging.getLogger(__name__)

# bookkeeping types, dropped when merging
CHECKSUM_TYPE = decode_mac_roman(b"cs\x9fm")
SIGNATURE_TYPE = decode_mac_roman(b"ds\x95g")

Resource = namedtuple("Resource", "type id name data")


class DecodeError(ValueError):
    pass

class TruncatedHeader(DecodeError):
    pass

class TruncatedBuffer(DecodeError):
    pass

class InvalidHeader(TruncatedBuffer):
    pass

class DuplicateType(DecodeError):
    pass


def _slice(buf, start, end, what):
    if start > end or end > len(buf):
        raise TruncatedBuffer("%s [0x%x:0x%x] outside of %d byte buffer"
                              % (what, start, end, len(buf)))
    return buf[start:end]

def _parse(st, buf, offset, what):
    return st.parse(_slice(buf, offset, offset + st.sizeof(), what))


def read_resource_fork(buffer):
    """Decode one container into {type: {id: Resource}}.

    Either a complete index is returned or a DecodeError is raised,
    the buffer itself is never modified.
    """
    buf = bytes(buffer)

    if len(buf) < Header.sizeof():
        raise TruncatedHeader("need %d header bytes, got %d"
                              % (Header.sizeof(), len(buf)))
    hdr = Header.parse(buf[:Header.sizeof()])

    # The format repeats these offsets at their targets, only presence is
    # checked as most writers leave them unfilled
    for name in ("data_offset", "map_offset"):
        offset = hdr[name]
        if offset + DataLength.sizeof() > len(buf):
            raise InvalidHeader("%s 0x%x points outside of %d byte buffer"
                                % (name, offset, len(buf)))

    data = _slice(buf, hdr.data_offset, hdr.data_offset + hdr.data_length,
                  "data region")
    rmap = _slice(buf, hdr.map_offset, hdr.map_offset + hdr.map_length,
                  "map region")

    maphdr = _parse(MapHeader, rmap, 0, "map header")
    types = _slice(rmap, maphdr.type_list_offset, maphdr.name_list_offset,
                   "type list")
    names = _slice(rmap, maphdr.name_list_offset, len(rmap), "name list")

    count = _parse(TypeListHeader, types, 0, "type list header").count

    resources = {}
    for i in range(count):
        entry = _parse(TypeEntry, types,
                       TypeListHeader.sizeof() + i * TypeEntry.sizeof(),
                       "type entry %d" % i)
        restype = decode_mac_roman(entry.tag)

        if restype in resources:
            raise DuplicateType("type %r listed twice" % restype)

        items = resources[restype] = {}
        for j in range(entry.quantity):
            res = _read_item(types, names, data, restype,
                             entry.offset + j * ItemEntry.sizeof())
            if res.id in items:
                logger.warning("duplicate resource %r %d, keeping the last one",
                               restype, res.id)
            items[res.id] = res

    logger.debug("decoded %d types, %d resources", len(resources),
                 sum(len(x) for x in resources.values()))
    return resources

def _read_item(types, names, data, restype, offset):
    item = _parse(ItemEntry, types, offset, "%r item at 0x%x" % (restype, offset))

    if item.name_offset == NO_NAME:
        name = ""
    else:
        length = _parse(NameLength, names, item.name_offset,
                        "name of %r %d" % (restype, item.id))
        start = item.name_offset + NameLength.sizeof()
        name = decode_mac_roman(_slice(names, start, start + length,
                                       "name of %r %d" % (restype, item.id)))

    length = _parse(DataLength, data, item.data_offset,
                    "data length of %r %d" % (restype, item.id))
    start = item.data_offset + DataLength.sizeof()
    payload = _slice(data, start, start + length,
                     "data of %r %d" % (restype, item.id))

    return Resource(restype, item.id, name, bytes(payload))

def read_resource_fork_file(path):
    return read_resource_fork(Path(path).read_bytes())

__all__ = [
    "Resource", "DecodeError", "TruncatedHeader", "TruncatedBuffer",
    "InvalidHeader", "DuplicateType", "read_resource_fork",
    "read_resource_fork_file", "CHECKSUM_TYPE",
    "SIGNATURE_TYPE",
]
