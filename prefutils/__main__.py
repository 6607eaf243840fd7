import sys

from prefutils.cli import main

sys.exit(main())
