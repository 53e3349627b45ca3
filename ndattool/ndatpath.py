import logging
from pathlib import Path

from ndattool.ndat import (DecodeError, read_resource_fork_file,
    CHECKSUM_TYPE, SIGNATURE_TYPE)

logger = logging.getLogger(__name__)

EXTENSION = ".ndat"

def find_ndat_files(*paths):
    """Recursively collect .ndat files under each path, in argument order."""
    found = []
    for path in paths:
        found.extend(_walk(Path(path).absolute()))
    return found

def _walk(path):
    if path.is_dir():
        for child in sorted(path.iterdir()):
            if child.is_dir() or child.suffix == EXTENSION:
                yield from _walk(child)
    elif not path.exists():
        raise FileNotFoundError("No such file or directory: '%s'" % path)
    elif path.suffix == EXTENSION:
        yield path

def merge_resource_forks(forks):
    """Merge decoded forks in order, later forks replace earlier (type, id)."""
    merged = {}
    for fork in forks:
        for restype, items in fork.items():
            merged.setdefault(restype, {}).update(items)
    return merged

def read_resource_forks(*paths, skip_invalid=False):
    """Decode every .ndat file found under paths into one index.

    Stops at the first file that fails to decode unless skip_invalid is set,
    in which case the file is logged and left out.
    """
    forks = []
    for path in find_ndat_files(*paths):
        try:
            forks.append(read_resource_fork_file(path))
        except DecodeError as e:
            if not skip_invalid:
                raise type(e)("%s: %s" % (path, e)) from e
            logger.warning("skipping %s: %s", path, e)
            continue
        logger.info("read %s", path)

    merged = merge_resource_forks(forks)
    merged.pop(CHECKSUM_TYPE, None)
    merged.pop(SIGNATURE_TYPE, None)
    return merged

__all__ = ["EXTENSION", "find_ndat_files", "merge_resource_forks",
           "read_resource_forks"]
