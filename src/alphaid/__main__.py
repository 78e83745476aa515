import sys

from alphaid.cli import main

sys.exit(main())
