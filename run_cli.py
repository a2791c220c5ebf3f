import sys
from typing import List, Optional

import receiver_cli
import sender_cli

USAGE = """Usage:
  run_cli.py encode <inputFile> <outputDir>
    Split the file into QR codes, one PNG per chunk.

  run_cli.py decode <inputDir> <outputFile>
    Read every PNG in the directory, scan the QR codes and write the
    rebuilt file."""

COMMANDS = {
    'encode': sender_cli.main,
    'decode': receiver_cli.main,
}


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv or argv[0] not in COMMANDS:
        print(USAGE)
        return 0
    return COMMANDS[argv[0]](argv[1:])


if __name__ == '__main__':
    sys.exit(main())
