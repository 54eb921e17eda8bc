"""Report the memory map of a process, like pmap -x.

$ python examples/pmap.py 32402
$ python examples/pmap.py --file smaps.txt --path libc
"""
import argparse
import sys

import procmaps


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument('pid', type=int, nargs='?')
    parser.add_argument('--file', help='read a saved smaps file instead of /proc/<pid>/smaps')
    parser.add_argument('--path', help='only show mappings whose path contains this')
    args = parser.parse_args()
    if (args.pid is None) == (args.file is None):
        parser.error('give exactly one of pid or --file')

    predicate = None
    if args.path is not None:
        predicate = lambda m: m.path is not None and args.path in m.path

    try:
        if args.file is not None:
            records = procmaps.read_filter(args.file, predicate)
        else:
            records = procmaps.read_pid(args.pid, predicate)
    except procmaps.ProcMapsException as e:
        sys.exit('pmap: {}'.format(e))

    templ = "%-16s %10s %10s %10s  %-5s %s"
    print(templ % ("Address", "Kbytes", "RSS", "Dirty", "Mode", "Mapping"))
    for mapping, usage in records:
        print(templ % (
            '{:016x}'.format(mapping.start),
            mapping.size >> 10,
            usage.rss >> 10,
            (usage.shared_dirty + usage.private_dirty) >> 10,
            mapping.mode,
            mapping.path or '[anon]'))
    total = procmaps.sum_usage(usage for _, usage in records)
    print("-" * 60)
    print(templ % (
        "total kB",
        sum(mapping.size for mapping, _ in records) >> 10,
        total.rss >> 10,
        (total.shared_dirty + total.private_dirty) >> 10,
        '',
        ''))


if __name__ == '__main__':
    main()
