import sys

from monkey.cli import main

sys.exit(main())
