import sys

from favcmd.cli import main

sys.exit(main())
