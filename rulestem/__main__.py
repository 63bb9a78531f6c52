import sys

from rulestem.cli import main

sys.exit(main())
