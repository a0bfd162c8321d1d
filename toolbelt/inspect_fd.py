"""Show the open file descriptors of a process and its children."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from toolbelt.ps_utils import PsError, get_child_processes, get_target


def main(argv: Sequence[str] | None = None) -> int:
    """Inspect the process named or numbered by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: inspect-fd <name or pid of target>")
        return 1
    target = args[0]
    try:
        process = get_target(target)
        if process is None:
            print(
                f"Target {target} did not match any running PIDs or executable.",
                file=sys.stderr,
            )
            return 1
        process.print(target)
        children = get_child_processes(process.pid)
    except PsError as err:
        print(err, file=sys.stderr)
        return 1
    if children:
        print(f"\n{target} child info: ")
    for child in children:
        child.print(target)
    return 0


if __name__ == "__main__":
    sys.exit(main())