import sys

from peperone.cli import main

sys.exit(main())
