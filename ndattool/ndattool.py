import re
import sys
import logging

from pathlib import Path
from argparse import ArgumentParser

from ndattool.ndat import DecodeError
from ndattool.ndatpath import read_resource_forks

logger = logging.getLogger(__name__)

argparser = ArgumentParser(description="List or dump resources from .ndat files")
argparser.add_argument("paths", type=Path, nargs="+")
argparser.add_argument("-o", "--out", type=Path,
                       help="write each resource to OUT/<type>/<id>.bin")
argparser.add_argument("-t", "--type", action="append", dest="types",
                       metavar="TYPE", help="only these resource types")
argparser.add_argument("--skip-invalid", action="store_true",
                       help="skip files that fail to decode")
argparser.add_argument("-v", "--verbose", action="store_true")

def type_dirname(restype):
    return re.sub(r'[^\w.-]', '_', restype)

def select(resources, types=None):
    for restype in sorted(resources):
        if types and restype not in types:
            continue
        items = resources[restype]
        for resid in sorted(items):
            yield items[resid]

def print_listing(resources, out=None):
    print("Type", "Id", "Id(hex)", "Length", "Name", sep='\t', file=out)
    for res in resources:
        print(res.type, res.id, hex(res.id), len(res.data), res.name,
              sep='\t', file=out)

def dump(resources, outdir):
    count = 0
    for res in resources:
        path = outdir / type_dirname(res.type) / ("%d.bin" % res.id)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("wb") as fd:
            fd.write(res.data)
        count += 1
    return count

def main(argv=None):
    args = argparser.parse_args(argv)

    logging.basicConfig(format="%(levelname)s: %(message)s",
                        level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        resources = read_resource_forks(*args.paths,
                                        skip_invalid=args.skip_invalid)
    except (DecodeError, OSError) as e:
        sys.stderr.write("%s\n" % e)
        return 1

    selected = select(resources, args.types)
    if args.out:
        count = dump(selected, args.out)
        logger.info("wrote %d resources to %s", count, args.out)
    else:
        print_listing(selected)
    return 0

if __name__ == "__main__":
    sys.exit(main())
