import sys

from schemey.cli import main

sys.exit(main())
