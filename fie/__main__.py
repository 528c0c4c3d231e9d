import sys

from fie.cli import main

sys.exit(main())
